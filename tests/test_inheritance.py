import pytest

from inheritance import (ApplicationError, Child, Creature, Dragon, Parent,
                         StuffedChild, SuperBadError, class_lineage)


def test_inherited_display_error(capsys):
    SuperBadError().display_error()
    assert capsys.readouterr().out == "Error! Error!\n"
    assert isinstance(SuperBadError(), ApplicationError)


def test_class_lineage_of_string():
    assert class_lineage("foobar") == ["str", "object"]
    assert class_lineage(Child()) == ["Child", "Parent", "object"]


def test_creature_and_dragon_fight():
    assert Creature("Gus").fight() == "Punch to the chops!"
    assert Dragon("Puff").fight() == "Breathes fire!"


def test_fight_dispatches_on_runtime_type():
    creatures = [Creature("Gus"), Dragon("Puff")]
    assert [c.fight() for c in creatures] == ["Punch to the chops!", "Breathes fire!"]


def test_name_is_set_once():
    dragon = Dragon("Puff")
    assert dragon.name == "Puff"
    with pytest.raises(AttributeError):
        dragon.name = "Smaug"


def test_empty_name_rejected():
    with pytest.raises(ValueError):
        Creature("")


def test_implicit_is_inherited(capsys):
    Parent().implicit()
    Child().implicit()
    assert capsys.readouterr().out.splitlines() == ["PARENT implicit()", "PARENT implicit()"]


def test_override(capsys):
    Parent().override()
    Child().override()
    assert capsys.readouterr().out.splitlines() == ["PARENT override()", "CHILD override()"]


def test_altered_calls_parent_between_child_lines(capsys):
    Child().altered()
    assert capsys.readouterr().out.splitlines() == [
        "CHILD, BEFORE PARENT altered()",
        "PARENT altered()",
        "CHILD, AFTER PARENT altered()",
    ]


def test_stuffed_child_keeps_stuff():
    child = StuffedChild("toys")
    assert child.stuff == "toys"
    assert isinstance(child, Parent)
