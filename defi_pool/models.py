"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

OperationKind = Literal["deposit", "borrow", "repay"]
OPERATIONS: tuple[OperationKind, ...] = ("deposit", "borrow", "repay")

OutcomeStatus = Literal["success", "validation_error", "submission_error", "duplicate"]


@dataclass(frozen=True)
class PoolSnapshot:
    """Pool and user balances in SUI display units."""

    pool_balance: str = "0"
    user_balance: str = "0"
    user_debt: str = "0"

    @classmethod
    def zero(cls) -> PoolSnapshot:
        return cls()


@dataclass(frozen=True)
class TransactionParams:
    """Inputs for building a single pool transaction."""

    amount: str
    package_id: str
    pool_id: str


@dataclass(frozen=True)
class TransactionOutcome:
    """Structured result of a user-initiated pool operation."""

    status: OutcomeStatus
    operation: OperationKind
    message: str
    digest: str = ""
    explorer_url: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "success"
