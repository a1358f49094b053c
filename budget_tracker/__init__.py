"""Mini README: Package initializer for the budget tracker.

The ledger core lives in ``budget_tracker.finance`` and has no web or
configuration dependencies. The FastAPI dashboard in
``budget_tracker.interface`` is one presentation layer that drives it.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
