"""
inheritance.py
Single inheritance: inherited methods, overriding, and calling the parent version with super().
"""

from typing import List


# -----------------------
# 1) Inherited as is
# -----------------------
class ApplicationError:
    def display_error(self):
        print("Error! Error!")


class SuperBadError(ApplicationError):
    pass


def class_lineage(obj) -> List[str]:
    """Class names from obj's class up to object, e.g. ["str", "object"]."""
    names = []
    cls = type(obj)
    while cls is not None:
        names.append(cls.__name__)
        bases = cls.__bases__
        cls = bases[0] if bases else None
    return names


# -----------------------
# 2) Overriding
# -----------------------
class Creature:
    def __init__(self, name: str):
        if not name:
            raise ValueError("a creature needs a name")
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def fight(self) -> str:
        return "Punch to the chops!"


class Dragon(Creature):
    def fight(self) -> str:
        return "Breathes fire!"


# -----------------------
# 3) Implicit, override, altered
# -----------------------
class Parent:
    def implicit(self):
        print("PARENT implicit()")

    def override(self):
        print("PARENT override()")

    def altered(self):
        print("PARENT altered()")


class Child(Parent):
    def override(self):
        print("CHILD override()")

    def altered(self):
        print("CHILD, BEFORE PARENT altered()")
        super().altered()
        print("CHILD, AFTER PARENT altered()")


class StuffedChild(Parent):
    # own state first, then let the parent finish initialising
    def __init__(self, stuff):
        self.stuff = stuff
        super().__init__()


if __name__ == "__main__":
    err = SuperBadError()
    err.display_error()

    print(class_lineage("foobar"))

    for creature in [Creature("Gus"), Dragon("Puff")]:
        print(f"{creature.name}: {creature.fight()}")

    dad = Parent()
    son = Child()

    dad.implicit()
    son.implicit()

    dad.override()
    son.override()

    dad.altered()
    son.altered()
