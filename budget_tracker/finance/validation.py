"""Mini README: Input parsing for ledger submissions.

Structure:
    * TransactionValidationError - raised when a description or amount is unusable.
    * parse_description / parse_amount - coerce raw form values.
    * validate_submission - checks both fields before any ledger mutation.

Raw values usually arrive as text typed by the user. The ledger turns a
``TransactionValidationError`` into a logged no-op, so callers of the ledger
never see it; the helpers raise so they stay easy to test in isolation.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Tuple, Union

AmountInput = Union[str, int, float, Decimal]

# amounts must stay below one quadrillion in magnitude
MAX_AMOUNT_DIGITS = 15


class TransactionValidationError(ValueError):
    """Raised when a submitted description or amount cannot be stored."""


def parse_description(value: object) -> str:
    """Return the stripped description, rejecting blank input."""

    if value is None:
        raise TransactionValidationError("Description is required.")
    description = str(value).strip()
    if not description:
        raise TransactionValidationError("Description must not be blank.")
    return description


def parse_amount(value: object) -> Decimal:
    """Parse an amount from text or a number into a finite ``Decimal``."""

    # bool is an int subclass; "True" is not an amount
    if value is None or isinstance(value, bool):
        raise TransactionValidationError("Amount is required.")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    else:
        text = str(value).strip()
        if not text:
            raise TransactionValidationError("Amount must not be blank.")
        try:
            amount = Decimal(text)
        except InvalidOperation as error:
            raise TransactionValidationError(f"Amount '{text}' is not a number.") from error
    if not amount.is_finite():
        raise TransactionValidationError(f"Amount '{value}' is not a finite number.")
    if amount != 0 and amount.adjusted() >= MAX_AMOUNT_DIGITS:
        raise TransactionValidationError(f"Amount '{value}' is too large.")
    return amount


def validate_submission(description: object, amount: object) -> Tuple[str, Decimal]:
    """Validate a description/amount pair as a unit."""

    return parse_description(description), parse_amount(amount)
