"""Mini README: Budget ledger core.

This package holds the in-memory income/expense ledger, its single edit
session and the derived totals. It has no web, template or configuration
imports so it can be driven from tests or any presentation layer.
"""

from .ledger import (
    EditSession,
    Ledger,
    Transaction,
    TransactionNotFoundError,
    TransactionType,
    round_currency,
)
from .validation import TransactionValidationError, parse_amount, parse_description

__all__ = [
    "EditSession",
    "Ledger",
    "Transaction",
    "TransactionNotFoundError",
    "TransactionType",
    "TransactionValidationError",
    "parse_amount",
    "parse_description",
    "round_currency",
]
