"""
Age comparison between two people.

When both ages are equal the second person is reported as the older one.
"""

from typing import Tuple

from pydantic import BaseModel, Field

from ..utils.console import Console


class Person(BaseModel):
    """A named person with an age."""

    name: str = Field(min_length=1, description="Person's name")
    age: int = Field(description="Age in years")

    def describe(self) -> str:
        return f"{self.name} (age {self.age})"


def order_by_age(first: Person, second: Person) -> Tuple[Person, Person]:
    """Return ``(older, younger)``."""
    if first.age > second.age:
        return first, second
    return second, first


def format_comparison(first: Person, second: Person) -> str:
    older, younger = order_by_age(first, second)
    return f"{older.describe()} is older than {younger.describe()}."


def _read_person(console: Console, number: int) -> Person:
    console.prompt(f"Enter the name of person #{number}: ")
    name = console.read_line()
    console.prompt(f"Enter the age of {name}: ")
    age = console.read_int()
    return Person(name=name, age=age)


def run(console: Console) -> Tuple[Person, Person]:
    """Ask for two people and print which one is older."""
    first = _read_person(console, 1)
    second = _read_person(console, 2)
    console.print(format_comparison(first, second))
    return order_by_age(first, second)
