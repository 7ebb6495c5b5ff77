"""Data-structure and programming drills: linked lists, stacks, queues and small exercises."""

__version__ = "0.1.0"