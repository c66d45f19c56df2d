"""
classes.py
Classes and objects: instance values, class-level values, a context value passed
in instead of a global, and a registry that counts the objects it creates.

Configure by environment variable:
  COMPUTER_MANUFACTURER - manufacturer shown for every Computer (default: Mango Computer, Inc.)

Example usage:
  python classes.py --manufacturer "Mango Computer, Inc."
"""

import os
import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional


DEFAULT_MANUFACTURER = "Mango Computer, Inc."


# -----------------------
# 1) Instance values
# -----------------------
class Language:
    def __init__(self, name: str, creator: str):
        self._name = name
        self._creator = creator

    @property
    def name(self) -> str:
        return self._name

    @property
    def creator(self) -> str:
        return self._creator

    def description(self) -> str:
        return f"I'm {self._name} and I was created by {self._creator}!"


LANGUAGES = [
    ("Ruby", "Yukihiro Matsumoto"),
    ("Python", "Guido van Rossum"),
    ("JavaScript", "Brendan Eich"),
]

def describe_languages(languages=LANGUAGES) -> List[str]:
    return [Language(name, creator).description() for name, creator in languages]


# -----------------------
# 2) Instance, class-level and context values
# -----------------------
@dataclass(frozen=True)
class ComputerContext:
    """Values shared by every Computer. Passed in explicitly, never read from a global."""
    manufacturer: str = DEFAULT_MANUFACTURER


class Computer:
    _files = {"hello": "Hello, world!"}

    def __init__(self, username: str, password, context: ComputerContext):
        self._username = username
        self._password = password
        self._context = context

    @property
    def current_user(self) -> str:
        return self._username

    @property
    def manufacturer(self) -> str:
        return self._context.manufacturer

    @classmethod
    def display_files(cls) -> Dict[str, str]:
        # copy so nobody edits the class-level mapping through the result
        return dict(cls._files)


def computer_report(computer: Computer) -> List[str]:
    return [
        f"Current user: {computer.current_user}",
        f"Manufacturer: {computer.manufacturer}",
        f"Files: {Computer.display_files()}",
    ]


# -----------------------
# 3) Counting instances
# -----------------------
class Person:
    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name


class PersonRegistry:
    """Creates Person objects and keeps the running count of them."""

    def __init__(self):
        self._count = 0

    def create(self, name: str) -> Person:
        person = Person(name)
        self._count += 1
        return person

    def number_of_instances(self) -> int:
        return self._count


# -----------------------
# CLI
# -----------------------
def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser()
    p.add_argument('--manufacturer', default=None, help=f'Computer manufacturer (env COMPUTER_MANUFACTURER, default "{DEFAULT_MANUFACTURER}")')
    return p.parse_args(argv)

def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    manufacturer = args.manufacturer or os.getenv('COMPUTER_MANUFACTURER') or DEFAULT_MANUFACTURER

    for line in describe_languages():
        print(line)

    hal = Computer("Dave", 12345, ComputerContext(manufacturer=manufacturer))
    for line in computer_report(hal):
        print(line)

    registry = PersonRegistry()
    registry.create("Yukihiro")
    registry.create("David")
    print(f"Number of Person instances: {registry.number_of_instances()}")

if __name__ == "__main__":
    main()
