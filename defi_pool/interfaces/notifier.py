"""Notifier protocol — transaction outcome channel abstraction."""
from typing import Protocol

from ..models import TransactionOutcome


class Notifier(Protocol):
    """Abstract interface for delivering transaction outcomes."""

    async def notify(self, outcome: TransactionOutcome) -> bool: ...
