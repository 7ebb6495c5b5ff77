"""A person and a person with a date of birth."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Person:
    """A person known by first and last name."""

    first: str = ""
    last: str = ""

    def describe(self) -> str:
        """Return the person's names, one per line."""
        return f"First Name: {self.first}\nLast Name: {self.last}\n"


@dataclass
class Birthday(Person):
    """A person with a day, month and year of birth."""

    SEPARATOR = "/"

    day: int = 0
    month: int = 0
    year: int = 0

    def date_of_birth(self) -> str:
        """Return the date of birth as day/month/year."""
        return self.SEPARATOR.join(str(part) for part in (self.day, self.month, self.year))