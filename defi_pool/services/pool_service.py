"""Lending pool orchestration — reads, builds and submits pool operations."""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from ..chains.sui import SuiClient
from ..chains.sui.transaction import ObjectInput, TransactionRequest, shared_object_arg
from ..config import AppConfig
from ..exceptions import DuplicateSubmissionError, ValidationError
from ..interfaces.chain import ChainClient
from ..interfaces.notifier import Notifier
from ..interfaces.signer import TransactionSigner
from ..models import OperationKind, PoolSnapshot, TransactionOutcome, TransactionParams
from ..notifications import TelegramNotifier
from ..protocols.lending_pool import PoolStateReader, build_request
from ..state import InFlightGuard
from ..validation import require_valid_amount
from .result_handler import TransactionResultHandler, explorer_url

logger = logging.getLogger(__name__)


class PoolService:
    """Entry point for the presentation layer.

    Reads never raise; ``execute`` reports every failure as a
    ``TransactionOutcome``.
    """

    def __init__(
        self,
        config: AppConfig,
        chain_client: ChainClient | None = None,
        on_read_failure: Callable[[str, Exception], None] | None = None,
    ) -> None:
        self._config = config
        self._client: ChainClient = chain_client or SuiClient(config.chain)
        self._reader = PoolStateReader(self._client, config.pool, on_read_failure)

        notifiers: list[Notifier] = []
        if config.notifications.telegram.enabled:
            notifiers.append(TelegramNotifier(config.notifications.telegram))
        self._handler = TransactionResultHandler(
            notifiers, explorer_base_url=config.chain.explorer_url
        )
        self._guard = InFlightGuard()

    @property
    def handler(self) -> TransactionResultHandler:
        return self._handler

    def explorer_url(self, digest: str) -> str:
        return explorer_url(digest, self._config.chain.explorer_url)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def refresh(self, user_address: str) -> PoolSnapshot:
        return await self._reader.refresh(user_address, self._config.pool.pool_id)

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def build(self, operation: OperationKind, amount: str) -> TransactionRequest:
        """Validate *amount* and build the unsigned request.

        Raises:
            ValidationError: *amount* is empty, non-numeric or not positive.
        """
        params = TransactionParams(
            amount=require_valid_amount(amount),
            package_id=self._config.pool.package_id,
            pool_id=self._config.pool.pool_id,
        )
        return build_request(operation, params)

    async def serialize(self, request: TransactionRequest) -> str:
        """Resolve object inputs over RPC and return base64 TransactionKind bytes."""
        object_ids = request.object_ids()
        responses = await asyncio.gather(
            *(self._client.get_object(object_id) for object_id in object_ids)
        )
        mutability = {
            inp.object_id: inp.mutable
            for inp in request.inputs
            if isinstance(inp, ObjectInput)
        }
        object_args = {
            object_id: shared_object_arg(response, mutability[object_id])
            for object_id, response in zip(object_ids, responses)
        }
        return request.to_base64(object_args)

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    async def execute(
        self,
        operation: OperationKind,
        amount: str,
        sender: str,
        signer: TransactionSigner,
        set_digest: Callable[[str], None] | None = None,
        on_snapshot: Callable[[PoolSnapshot], None] | None = None,
    ) -> TransactionOutcome:
        """Validate, build, sign and submit one pool operation."""
        try:
            request = self.build(operation, amount)
        except ValidationError as e:
            return await self._handler.reject(operation, str(e), "validation_error")

        async def refresh() -> None:
            snapshot = await self.refresh(sender)
            if on_snapshot is not None:
                on_snapshot(snapshot)

        try:
            with self._guard.hold(operation):
                logger.info("Submitting %s of %s SUI from %s", operation, amount.strip(), sender)
                try:
                    result = await signer.sign_and_execute(request)
                except Exception as e:
                    return await self._handler.on_error(e, operation)
                return await self._handler.on_success(
                    result, operation, set_digest or (lambda _digest: None), refresh
                )
        except DuplicateSubmissionError as e:
            logger.warning("Rejected duplicate %s submission", operation)
            return await self._handler.reject(operation, str(e), "duplicate")
