"""pytps: a transaction processing system for undo/redo."""
from pytps.tps import (
    StackExhausted,
    Transaction,
    TransactionStack,
    TransactionStackError,
)

__all__ = [
    "StackExhausted",
    "Transaction",
    "TransactionStack",
    "TransactionStackError",
]
