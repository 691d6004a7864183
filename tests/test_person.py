"""Tests for the demo person payloads."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from pytps.person import Person, ChangeNameTransaction, IncrementAgeTransaction


def test_person_str():
    assert str(Person("Vito", 65)) == "Vito (Age 65)"


def test_change_name_captures_old_name():
    person = Person("Vito", 65)
    transaction = ChangeNameTransaction(person, "Sonny")
    assert transaction.old_name == "Vito"
    transaction.execute_do()
    assert person.name == "Sonny"
    transaction.execute_undo()
    assert person == Person("Vito", 65)


def test_increment_age_negative():
    person = Person("Vito", 65)
    transaction = IncrementAgeTransaction(person, -35)
    transaction.execute_do()
    assert person.age == 30
    transaction.execute_undo()
    assert person.age == 65


def test_transaction_descriptions():
    person = Person("Vito", 65)
    rename = str(ChangeNameTransaction(person, "Sonny"))
    assert rename.splitlines()[0] == "ChangeNameTransaction"
    assert "Sonny" in rename and "Vito" in rename
    inc = str(IncrementAgeTransaction(person, 3))
    assert inc.splitlines()[0] == "IncrementAgeTransaction"
    assert "by 3" in inc
