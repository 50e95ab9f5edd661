"""Presentation state for the pool page — immutable, with pure transitions.

The caller owns a ``FormState`` and replaces it with the value returned by
each transition. ``InFlightGuard`` is the one mutable piece: it must be shared
across concurrent submissions to reject duplicates.
"""
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace

from .exceptions import DuplicateSubmissionError
from .models import OPERATIONS, OperationKind, PoolSnapshot


@dataclass(frozen=True)
class FormState:
    deposit_amount: str = ""
    borrow_amount: str = ""
    repay_amount: str = ""
    loading: bool = False
    tx_digest: str = ""
    snapshot: PoolSnapshot = field(default_factory=PoolSnapshot.zero)


def _amount_field(operation: OperationKind) -> str:
    if operation not in OPERATIONS:
        raise ValueError(f"Unknown pool operation: {operation!r}")
    return f"{operation}_amount"


def amount_for(state: FormState, operation: OperationKind) -> str:
    return getattr(state, _amount_field(operation))


def with_amount(state: FormState, operation: OperationKind, amount: str) -> FormState:
    return replace(state, **{_amount_field(operation): amount})


def start_loading(state: FormState) -> FormState:
    return replace(state, loading=True)


def stop_loading(state: FormState) -> FormState:
    return replace(state, loading=False)


def record_success(state: FormState, operation: OperationKind, digest: str) -> FormState:
    """Remember the digest and clear the submitted amount."""
    return replace(state, tx_digest=digest, **{_amount_field(operation): ""})


def with_snapshot(state: FormState, snapshot: PoolSnapshot) -> FormState:
    return replace(state, snapshot=snapshot)


def can_submit(state: FormState, operation: OperationKind, connected: bool) -> bool:
    """Whether the action for *operation* should be enabled."""
    return connected and not state.loading and bool(amount_for(state, operation))


class InFlightGuard:
    """Track outstanding submissions per operation kind."""

    def __init__(self) -> None:
        self._active: set[str] = set()

    def is_active(self, operation: OperationKind) -> bool:
        return operation in self._active

    @contextmanager
    def hold(self, operation: OperationKind) -> Iterator[None]:
        """Mark *operation* in flight for the duration of the block.

        Raises:
            DuplicateSubmissionError: *operation* is already in flight.
        """
        if operation in self._active:
            raise DuplicateSubmissionError(operation)
        self._active.add(operation)
        try:
            yield
        finally:
            self._active.discard(operation)
