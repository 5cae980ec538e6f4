"""Methods as functions with the receiver as first argument, and closures over copies."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass

_GREETING_PREFIX = "Hi! "
_AGE_LIMIT = 256


@dataclass
class Person:
    """A person with a name and an age held in one unsigned byte."""

    name: str
    age: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.age < _AGE_LIMIT:
            raise ValueError("age must lie between 0 and 255")

    def greeting(self) -> str:
        """Return a greeting for this person without changing the name."""
        return _GREETING_PREFIX + self.name

    def greet_in_place(self) -> str:
        """Prefix the stored name with a greeting and return the new name."""
        self.name = _GREETING_PREFIX + self.name
        return self.name

    def grown_age(self) -> int:
        """Return the age one year on, wrapping past 255, without changing it."""
        return (self.age + 1) % _AGE_LIMIT


def greeting_of(person: Person) -> str:
    """Return the same greeting as ``person.greeting()``."""
    return Person.greeting(person)


def age_counter(person: Person) -> Callable[[], int]:
    """Return a closure over a copy of ``person`` that ages the copy by one per call."""
    copy = dataclasses.replace(person)

    def grow() -> int:
        copy.age = copy.grown_age()
        return copy.age

    return grow


def demo() -> None:
    """Show bound and unbound method calls and closures built on methods."""
    person = Person("Ada Example", 15)
    print(person.greeting())
    print(Person.greeting(person))
    print(Person.greeting(person) == greeting_of(person))
    print(person.greet_in_place())

    first = age_counter(person)
    second = age_counter(person)
    print(first())
    print(second())
    print(first())