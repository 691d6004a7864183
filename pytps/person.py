"""Demo payload: a person record and two transactions that mutate it."""
from dataclasses import dataclass

from pytps.tps import Transaction


@dataclass
class Person:
    name: str
    age: int

    def __str__(self):
        return f"{self.name} (Age {self.age})"


class ChangeNameTransaction(Transaction):
    """Renames a person. The old name is captured when the transaction is built."""

    def __init__(self, person: Person, new_name: str):
        self.person = person
        self.old_name = person.name
        self.new_name = new_name

    def execute_do(self):
        self.person.name = self.new_name

    def execute_undo(self):
        self.person.name = self.old_name

    def __str__(self):
        return (f"ChangeNameTransaction\n"
                f"---redo renames Person to {self.new_name}\n"
                f"---undo renames Person to {self.old_name}")


class IncrementAgeTransaction(Transaction):
    """Adds inc to a person's age. A negative inc decrements."""

    def __init__(self, person: Person, inc: int):
        self.person = person
        self.inc = inc

    def execute_do(self):
        self.person.age += self.inc

    def execute_undo(self):
        self.person.age -= self.inc

    def __str__(self):
        return (f"IncrementAgeTransaction\n"
                f"---redo increments Person age by {self.inc}\n"
                f"---undo decrements Person age by {self.inc}")
