"""
composition.py
A has-a relationship: Child keeps an Other and uses it to get its work done,
so every call it passes on has to be written out by hand.
"""


class Other:
    def override(self):
        print("OTHER override()")

    def implicit(self):
        print("OTHER implicit()")

    def altered(self):
        print("OTHER altered()")


class Child:
    def __init__(self):
        self._other = Other()

    def implicit(self):
        self._other.implicit()

    def override(self):
        print("CHILD override()")

    def altered(self):
        print("CHILD, BEFORE OTHER altered()")
        self._other.altered()
        print("CHILD, AFTER OTHER altered()")


if __name__ == "__main__":
    son = Child()

    son.implicit()
    son.override()
    son.altered()
