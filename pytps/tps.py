"""Transaction stack: linear undo/redo over reversible transactions."""
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class TransactionStackError(Exception):
    """Raised on do or undo when there is no transaction available for it."""


StackExhausted = TransactionStackError


class Transaction:
    """Base class for transactions managed by a TransactionStack.

    A subclass must carry everything it needs to both apply and revert
    its mutation. execute_undo() must restore exactly the state that
    existed before the matching execute_do().
    """

    def execute_do(self):
        raise NotImplementedError

    def execute_undo(self):
        raise NotImplementedError

    def __str__(self):
        return type(self).__name__


class TransactionStack:
    """Transaction processing system built on a single transaction stack.

    Positions [0, top_index) hold transactions that are currently done
    and can be undone. Positions [top_index, size) hold transactions that
    were undone and can be redone. Pushing a new transaction discards the
    redoable region.
    """

    TRANSACTION_STACK_EXCEPTION = TransactionStackError

    def __init__(self):
        self._transactions: list[Transaction] = []
        # live entries, done + undone
        self.size: int = 0
        # where the next pushed transaction lands
        self.top_index: int = 0

    def clear_all_transactions(self):
        """Reset to an empty stack. Nothing is undone."""
        self._transactions = []
        self.top_index = 0
        self.size = 0
        logger.debug("Cleared all transactions")

    def process_transaction(self, transaction: Transaction):
        """Push a transaction and execute it. Leaves nothing to redo."""
        self._store(transaction)
        logger.debug("Processing %s", transaction)
        self.do_transaction()

    def push_transaction(self, transaction: Transaction):
        """Push a transaction without executing it.

        Any redoable transactions are lost. The pushed transaction counts
        as redoable until do_transaction() is called.
        """
        self._store(transaction)
        logger.debug("Pushed %s (not executed)", transaction)

    def _store(self, transaction: Transaction):
        del self._transactions[self.top_index:]
        self._transactions.append(transaction)
        self.size = self.top_index + 1

    def do_transaction(self):
        """Execute the transaction at top_index and advance past it."""
        if not self.has_transaction_to_do():
            logger.debug("Nothing to do (size=%d, top_index=%d)",
                         self.size, self.top_index)
            raise TransactionStackError("no transaction to do")
        transaction = self._transactions[self.top_index]
        transaction.execute_do()
        self.top_index += 1
        logger.debug("Do: %s (top_index=%d)", transaction, self.top_index)

    def undo_transaction(self):
        """Undo the most recently done transaction and step back over it."""
        if not self.has_transaction_to_undo():
            logger.debug("Nothing to undo (size=%d, top_index=%d)",
                         self.size, self.top_index)
            raise TransactionStackError("no transaction to undo")
        transaction = self._transactions[self.top_index - 1]
        transaction.execute_undo()
        self.top_index -= 1
        logger.debug("Undo: %s (top_index=%d)", transaction, self.top_index)

    def peek_transaction(self, index: int) -> Optional[Transaction]:
        """Return the transaction at index, or None if index is not live."""
        if 0 <= index < self.size:
            return self._transactions[index]
        return None

    def get_size(self) -> int:
        return self.size

    def get_undo_size(self) -> int:
        return self.top_index

    def get_do_size(self) -> int:
        return self.get_size() - self.get_undo_size()

    def has_transaction_to_do(self) -> bool:
        return self.get_do_size() > 0

    def has_transaction_to_undo(self) -> bool:
        return self.get_undo_size() > 0

    def get_undo_description(self) -> Optional[str]:
        """Describe the transaction the next undo would revert."""
        if self.has_transaction_to_undo():
            return str(self._transactions[self.top_index - 1])
        return None

    def get_redo_description(self) -> Optional[str]:
        """Describe the transaction the next redo would apply."""
        if self.has_transaction_to_do():
            return str(self._transactions[self.top_index])
        return None

    def __str__(self):
        lines = [
            f"--Number of Transactions: {self.size}",
            f"--Top Index: {self.top_index}",
            "--Current Transaction Stack:",
        ]
        for transaction in self._transactions[:self.size]:
            lines.append(f"----{transaction}")
        return "\n".join(lines) + "\n"

    def __repr__(self):
        return f"TransactionStack(size={self.size}, top_index={self.top_index})"
