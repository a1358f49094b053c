"""Mini README: Display helpers for currency amounts.

Keeping formatting here lets the dashboard templates stay free of rounding
logic and keeps the ledger free of presentation concerns.
"""

from __future__ import annotations

from decimal import Decimal

from ..finance.ledger import Transaction, TransactionType, round_currency


def format_currency(amount: Decimal, symbol: str = "$") -> str:
    """Render an amount with two decimals, e.g. ``$300.50`` or ``-$5.00``."""

    rounded = round_currency(Decimal(str(amount)))
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):.2f}"


def describe_transaction(transaction: Transaction, symbol: str = "$") -> str:
    """Return the list label shown for a transaction."""

    label = "Income" if transaction.transaction_type is TransactionType.INCOME else "Expense"
    return f"{label}: {format_currency(transaction.amount, symbol)}"
