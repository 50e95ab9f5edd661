"""Lending pool state reader — assembles a PoolSnapshot from the chain."""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from ...chains.sui.transaction import shared_object_arg
from ...config import PoolConfig
from ...interfaces.chain import ChainClient
from ...models import PoolSnapshot
from ...units import to_display_units
from . import parser
from .builder import build_get_debt

logger = logging.getLogger(__name__)

FailureHook = Callable[[str, Exception], None]


class PoolStateReader:
    """Fetch pool liquidity, user balance and user debt as one snapshot.

    Failures never propagate: a failed debt probe reports zero debt, and a
    failed pool or balance lookup reports an all-zero snapshot. Both are
    logged and passed to ``on_failure`` with the stage name (``"debt"`` or
    ``"pool"``).
    """

    def __init__(
        self,
        chain_client: ChainClient,
        config: PoolConfig,
        on_failure: FailureHook | None = None,
    ) -> None:
        self._client = chain_client
        self._package_id = config.package_id
        self._pool_id = config.pool_id
        self._coin_type = config.coin_type
        self._on_failure = on_failure

    def _report(self, stage: str, error: Exception) -> None:
        if self._on_failure is None:
            return
        try:
            self._on_failure(stage, error)
        except Exception as e:
            logger.error("Read failure hook raised: %s", e)

    async def _fetch_pool_and_balance(
        self, user_address: str, pool_id: str
    ) -> tuple[dict[str, Any], dict[str, Any]] | None:
        """Fetch the pool object and wallet balance; ``None`` if either fails."""
        pool_object, balance = await asyncio.gather(
            self._client.get_object(pool_id),
            self._client.get_balance(user_address, self._coin_type),
            return_exceptions=True,
        )
        failed = False
        for name, outcome in (("pool object", pool_object), ("balance", balance)):
            if not isinstance(outcome, BaseException):
                continue
            if not isinstance(outcome, Exception):
                raise outcome
            logger.error("Error fetching %s: %s", name, outcome)
            self._report("pool", outcome)
            failed = True
        if failed:
            return None
        return pool_object, balance

    async def _fetch_user_debt(
        self, user_address: str, pool_id: str, pool_object: dict[str, Any]
    ) -> str:
        """Probe ``get_debt`` via devInspect; any failure reads as zero debt."""
        try:
            tx = build_get_debt(self._package_id, pool_id, user_address)
            pool_arg = shared_object_arg(pool_object, mutable=False)
            tx_kind = tx.to_base64({pool_id: pool_arg})
            response = await self._client.dev_inspect_transaction_block(
                user_address, tx_kind
            )
            return to_display_units(parser.parse_u64_return(response))
        except Exception as e:
            logger.warning("Failed to fetch user debt: %s", e)
            self._report("debt", e)
            return "0"

    async def refresh(self, user_address: str, pool_id: str | None = None) -> PoolSnapshot:
        """Build a fresh snapshot for *user_address*."""
        pool_id = pool_id or self._pool_id
        fetched = await self._fetch_pool_and_balance(user_address, pool_id)
        if fetched is None:
            return PoolSnapshot.zero()
        pool_object, balance = fetched
        try:
            pool_balance = parser.parse_pool_balance(pool_object)
            user_balance = parser.parse_balance(balance)
        except Exception as e:
            logger.error("Error parsing pool data: %s", e)
            self._report("pool", e)
            return PoolSnapshot.zero()

        user_debt = await self._fetch_user_debt(user_address, pool_id, pool_object)

        snapshot = PoolSnapshot(
            pool_balance=pool_balance,
            user_balance=user_balance,
            user_debt=user_debt,
        )
        logger.info(
            "Pool snapshot — pool: %s SUI  balance: %s SUI  debt: %s SUI",
            snapshot.pool_balance,
            snapshot.user_balance,
            snapshot.user_debt,
        )
        return snapshot
