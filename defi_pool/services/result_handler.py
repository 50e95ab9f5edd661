"""Transaction outcome handling — digest extraction, notification, refresh."""
from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from ..interfaces.notifier import Notifier
from ..models import OperationKind, OutcomeStatus, TransactionOutcome

logger = logging.getLogger(__name__)

DEFAULT_EXPLORER_URL = "https://testnet.suivision.xyz"

_ACTION_LABELS: dict[str, str] = {
    "deposit": "Deposit",
    "borrow": "Borrow",
    "repay": "Repay",
}


def explorer_url(digest: str, base_url: str = DEFAULT_EXPLORER_URL) -> str:
    """Link to a committed transaction on the block explorer."""
    return f"{base_url.rstrip('/')}/txblock/{digest}"


def extract_digest(result: Any) -> str:
    """Read the transaction digest from a mapping or result object."""
    if isinstance(result, Mapping):
        digest = result.get("digest")
    else:
        digest = getattr(result, "digest", None)
    if not digest:
        raise ValueError("Transaction result has no digest")
    return str(digest)


def _error_text(error: BaseException) -> str:
    return getattr(error, "message", None) or str(error) or type(error).__name__


class TransactionResultHandler:
    """Turn submission results into outcomes and publish them to notifiers."""

    def __init__(
        self,
        notifiers: list[Notifier] | None = None,
        explorer_base_url: str = DEFAULT_EXPLORER_URL,
    ) -> None:
        self._notifiers: list[Notifier] = list(notifiers or [])
        self._explorer_base_url = explorer_base_url

    def subscribe(self, notifier: Notifier) -> None:
        self._notifiers.append(notifier)

    async def _publish(self, outcome: TransactionOutcome) -> None:
        for notifier in self._notifiers:
            try:
                await notifier.notify(outcome)
            except Exception as e:
                logger.error("Notifier notify failed: %s", e)

    async def on_success(
        self,
        result: Any,
        operation: OperationKind,
        set_digest: Callable[[str], None],
        refresh: Callable[[], Awaitable[Any]],
    ) -> TransactionOutcome:
        """Record the digest, publish success, then resynchronize the snapshot."""
        digest = extract_digest(result)
        logger.info("%s successful: %s", operation, digest)
        set_digest(digest)

        outcome = TransactionOutcome(
            status="success",
            operation=operation,
            message=f"{_ACTION_LABELS[operation]} successful! Tx: {digest}",
            digest=digest,
            explorer_url=explorer_url(digest, self._explorer_base_url),
        )
        await self._publish(outcome)
        await refresh()
        return outcome

    async def on_error(
        self, error: BaseException, operation: OperationKind
    ) -> TransactionOutcome:
        """Publish a submission failure; there is no retry."""
        logger.error("%s failed: %s", operation, error)
        outcome = TransactionOutcome(
            status="submission_error",
            operation=operation,
            message=f"{_ACTION_LABELS[operation]} failed: {_error_text(error)}",
        )
        await self._publish(outcome)
        return outcome

    async def reject(
        self, operation: OperationKind, message: str, status: OutcomeStatus
    ) -> TransactionOutcome:
        """Publish an operation that was refused before submission."""
        logger.info("%s rejected (%s): %s", operation, status, message)
        outcome = TransactionOutcome(status=status, operation=operation, message=message)
        await self._publish(outcome)
        return outcome
