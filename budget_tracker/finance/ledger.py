"""Mini README: In-memory budget ledger holding incomes and expenses.

Structure:
    * TransactionType - enum separating income from expense entries.
    * Transaction - immutable record with id, description and amount.
    * EditSession - the single transaction currently being edited, plus drafts.
    * TransactionNotFoundError - raised when an id is unknown to the ledger.
    * Ledger - owns both sequences, the edit session and the derived totals.

Identifiers look like ``income-0003``: the category is embedded in the id and
one counter per ledger keeps ids unique across both sequences. Records are
never mutated in place; edits swap in a new ``Transaction`` with the same id.
Invalid submissions are logged and ignored so the ledger is never left
half-updated. Totals are summed exactly and rounded once to cents.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from ..logging_utils import get_logger
from .validation import AmountInput, TransactionValidationError, validate_submission

LOGGER = get_logger(__name__)

CENT = Decimal("0.01")


def round_currency(value: Decimal) -> Decimal:
    """Round to two decimal places, halves away from zero."""

    with localcontext() as context:
        # the result keeps every integer digit plus two decimals
        context.prec = max(context.prec, value.adjusted() + 3)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


class TransactionType(str, Enum):
    """Enumerate the supported transaction categories."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error

    @classmethod
    def from_transaction_id(cls, transaction_id: str) -> "TransactionType":
        """Recover the category embedded in a ledger identifier."""

        prefix, _, _ = str(transaction_id).partition("-")
        return cls.from_str(prefix)


class TransactionNotFoundError(KeyError):
    """Raised when no transaction in either sequence has the given id."""

    def __init__(self, transaction_id: str) -> None:
        super().__init__(transaction_id)
        self.transaction_id = transaction_id

    def __str__(self) -> str:
        return f"Transaction {self.transaction_id} not found"


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single income or expense entry."""

    transaction_id: str
    transaction_type: TransactionType
    description: str
    amount: Decimal

    def as_dict(self) -> Dict[str, str]:
        """Export the transaction with JSON friendly values."""

        return {
            "transaction_id": self.transaction_id,
            "transaction_type": self.transaction_type.value,
            "description": self.description,
            "amount": str(self.amount),
        }


@dataclass(frozen=True, slots=True)
class EditSession:
    """Staged values for the one transaction being edited."""

    active_id: str
    draft_description: str
    draft_amount: str

    def as_dict(self) -> Dict[str, str]:
        return {
            "active_id": self.active_id,
            "draft_description": self.draft_description,
            "draft_amount": self.draft_amount,
        }


class Ledger:
    """Own income and expense sequences and compute their aggregates."""

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None) -> None:
        self._incomes: List[Transaction] = []
        self._expenses: List[Transaction] = []
        self._edit_session: Optional[EditSession] = None
        self._sequence = 0
        for transaction in transactions or ():
            self._register(transaction)
        LOGGER.debug(
            "Ledger initialised with %s incomes and %s expenses",
            len(self._incomes),
            len(self._expenses),
        )

    @classmethod
    def with_demo_transactions(cls) -> "Ledger":
        """Build a ledger with deterministic example entries."""

        ledger = cls()
        ledger.add_transaction(TransactionType.INCOME, "Salary", "2500")
        ledger.add_transaction(TransactionType.INCOME, "Freelance invoice", "480.75")
        ledger.add_transaction(TransactionType.EXPENSE, "Rent", "950")
        ledger.add_transaction(TransactionType.EXPENSE, "Groceries", "212.40")
        return ledger

    # -- internal helpers -------------------------------------------------

    def _sequence_for(self, transaction_type: TransactionType) -> List[Transaction]:
        if transaction_type is TransactionType.INCOME:
            return self._incomes
        return self._expenses

    def _next_id(self, transaction_type: TransactionType) -> str:
        """Generate the next identifier, unique across both sequences."""

        self._sequence += 1
        return f"{transaction_type.value}-{self._sequence:04d}"

    def _register(self, transaction: Transaction) -> None:
        """Store a preloaded transaction, keeping ids unique and well formed."""

        if self._locate(transaction.transaction_id) is not None:
            raise ValueError(f"Transaction {transaction.transaction_id} already exists.")
        if TransactionType.from_transaction_id(transaction.transaction_id) is not transaction.transaction_type:
            raise ValueError(
                f"Transaction {transaction.transaction_id} does not carry the "
                f"'{transaction.transaction_type.value}' prefix."
            )
        self._sequence_for(transaction.transaction_type).append(transaction)
        suffix = transaction.transaction_id.rsplit("-", 1)[-1]
        if suffix.isdigit():
            self._sequence = max(self._sequence, int(suffix))

    def _locate(self, transaction_id: str) -> Optional[Tuple[List[Transaction], int]]:
        for sequence in (self._incomes, self._expenses):
            for index, transaction in enumerate(sequence):
                if transaction.transaction_id == transaction_id:
                    return sequence, index
        return None

    # -- read accessors ---------------------------------------------------

    @property
    def incomes(self) -> Tuple[Transaction, ...]:
        return tuple(self._incomes)

    @property
    def expenses(self) -> Tuple[Transaction, ...]:
        return tuple(self._expenses)

    @property
    def edit_session(self) -> Optional[EditSession]:
        return self._edit_session

    @property
    def is_editing(self) -> bool:
        return self._edit_session is not None

    def transactions_of(self, transaction_type: TransactionType | str) -> Tuple[Transaction, ...]:
        """Return one category's transactions in insertion order."""

        return tuple(self._sequence_for(TransactionType.from_str(transaction_type)))

    def get_transaction(self, transaction_id: str) -> Transaction:
        """Retrieve a transaction by id from whichever sequence holds it."""

        located = self._locate(transaction_id)
        if located is None:
            raise TransactionNotFoundError(transaction_id)
        sequence, index = located
        return sequence[index]

    # -- mutators ---------------------------------------------------------

    def add_transaction(
        self,
        transaction_type: TransactionType | str,
        description: object,
        amount: AmountInput,
    ) -> Optional[str]:
        """Append a transaction and return its id, or ``None`` if rejected."""

        category = TransactionType.from_str(transaction_type)
        try:
            clean_description, clean_amount = validate_submission(description, amount)
        except TransactionValidationError as error:
            LOGGER.warning("Ignored %s submission: %s", category.value, error)
            return None

        transaction = Transaction(
            transaction_id=self._next_id(category),
            transaction_type=category,
            description=clean_description,
            amount=clean_amount,
        )
        self._sequence_for(category).append(transaction)
        LOGGER.info(
            "Added %s %s (%s) for %s",
            category.value,
            transaction.transaction_id,
            transaction.description,
            transaction.amount,
        )
        return transaction.transaction_id

    def delete_transaction(self, transaction_id: str) -> None:
        """Remove a transaction if present; unknown ids are ignored."""

        located = self._locate(transaction_id)
        if located is None:
            LOGGER.debug("Delete of unknown transaction %s ignored", transaction_id)
        else:
            sequence, index = located
            del sequence[index]
            LOGGER.info("Deleted transaction %s", transaction_id)

        if self._edit_session is not None and self._edit_session.active_id == transaction_id:
            self._edit_session = None
            LOGGER.info("Edit session for %s closed by delete", transaction_id)

    def begin_edit(self, transaction_id: str) -> Dict[str, str]:
        """Open an edit session seeded from the stored values.

        Any unsaved draft from a previous session is discarded. Raises
        ``TransactionNotFoundError`` when the id is unknown, in which case the
        current session is left untouched.
        """

        transaction = self.get_transaction(transaction_id)
        previous = self._edit_session
        if previous is not None and previous.active_id != transaction_id:
            LOGGER.debug("Discarding unsaved draft for %s", previous.active_id)

        self._edit_session = EditSession(
            active_id=transaction_id,
            draft_description=transaction.description,
            draft_amount=format(transaction.amount, "f"),
        )
        LOGGER.info("Editing transaction %s", transaction_id)
        return {
            "description": self._edit_session.draft_description,
            "amount": self._edit_session.draft_amount,
        }

    def update_draft(
        self, description: Optional[str] = None, amount: Optional[str] = None
    ) -> None:
        """Mirror in-progress form text into the active edit session."""

        if self._edit_session is None:
            return
        changes: Dict[str, str] = {}
        if description is not None:
            changes["draft_description"] = str(description)
        if amount is not None:
            changes["draft_amount"] = str(amount)
        self._edit_session = replace(self._edit_session, **changes)

    def save_edit(self, description: object, amount: AmountInput) -> bool:
        """Store new values for the transaction being edited.

        Returns ``False`` without changing anything when no session is active
        or the input is invalid; the session then stays open for a retry.
        """

        session = self._edit_session
        if session is None:
            LOGGER.warning("Save requested with no transaction being edited")
            return False
        try:
            clean_description, clean_amount = validate_submission(description, amount)
        except TransactionValidationError as error:
            LOGGER.warning("Ignored edit of %s: %s", session.active_id, error)
            return False

        located = self._locate(session.active_id)
        if located is None:
            raise TransactionNotFoundError(session.active_id)
        sequence, index = located
        sequence[index] = replace(
            sequence[index], description=clean_description, amount=clean_amount
        )
        self._edit_session = None
        LOGGER.info("Saved transaction %s", session.active_id)
        return True

    # -- aggregates -------------------------------------------------------

    def total_of(self, transaction_type: TransactionType | str) -> Decimal:
        """Sum one category exactly, then round the result to cents."""

        sequence = self._sequence_for(TransactionType.from_str(transaction_type))
        total = sum((transaction.amount for transaction in sequence), Decimal("0"))
        return round_currency(total)

    def remaining_budget(self) -> Decimal:
        """Rounded income total minus rounded expense total, rounded again."""

        income = self.total_of(TransactionType.INCOME)
        expense = self.total_of(TransactionType.EXPENSE)
        return round_currency(income - expense)

    def export_snapshot(self) -> Dict[str, object]:
        """Export the current state for JSON responses and templates."""

        return {
            "incomes": [transaction.as_dict() for transaction in self._incomes],
            "expenses": [transaction.as_dict() for transaction in self._expenses],
            "total_income": str(self.total_of(TransactionType.INCOME)),
            "total_expense": str(self.total_of(TransactionType.EXPENSE)),
            "remaining_budget": str(self.remaining_budget()),
            "edit_session": self._edit_session.as_dict() if self._edit_session else None,
        }
