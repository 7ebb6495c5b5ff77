[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsdrills"
version = "0.1.0"
description = "Small data-structure and programming drills: linked lists, stacks, queues and short exercises"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "stack", "queue", "data structures", "exercises", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsdrills-demo = "dsdrills.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["dsdrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
