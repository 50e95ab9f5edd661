"""SUI RPC client with fallback support."""
import logging
import ssl
from typing import Any

import aiohttp
import certifi

from ...config import ChainConfig

logger = logging.getLogger(__name__)

SUI_COIN_TYPE = "0x2::sui::SUI"


class SuiClient:
    """SUI blockchain RPC client with automatic endpoint fallback."""

    def __init__(self, config: ChainConfig) -> None:
        self.endpoints = list(config.rpc_endpoints)
        self.timeout = config.rpc_timeout
        self.current_rpc_index = 0

    async def rpc_call(self, method: str, params: list[Any]) -> dict[str, Any]:
        """Make RPC call with fallback to alternative endpoints."""
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}

        ssl_context = ssl.create_default_context(cafile=certifi.where())

        last_error: Exception | None = None
        for attempt in range(len(self.endpoints)):
            rpc_index = (self.current_rpc_index + attempt) % len(self.endpoints)
            rpc_url = self.endpoints[rpc_index]

            try:
                connector = aiohttp.TCPConnector(ssl=ssl_context)
                async with aiohttp.ClientSession(connector=connector) as session:
                    async with session.post(
                        rpc_url,
                        json=payload,
                        timeout=aiohttp.ClientTimeout(total=self.timeout),
                    ) as response:
                        result = await response.json()
                        if "error" in result:
                            raise RuntimeError(f"RPC Error: {result['error']}")

                        if rpc_index != self.current_rpc_index:
                            logger.info("Switched to RPC endpoint: %s", rpc_url)
                            self.current_rpc_index = rpc_index

                        return result.get("result", {})
            except Exception as e:
                last_error = e
                logger.warning("RPC endpoint %s failed: %s", rpc_url, e)
                if attempt < len(self.endpoints) - 1:
                    logger.info("Trying next endpoint...")
                continue

        raise RuntimeError(f"All RPC endpoints failed. Last error: {last_error}")

    async def get_object(self, object_id: str) -> dict[str, Any]:
        """Get an object with its type, owner and content."""
        return await self.rpc_call(
            "sui_getObject",
            [
                object_id,
                {"showType": True, "showContent": True, "showOwner": True},
            ],
        )

    async def get_balance(
        self, owner: str, coin_type: str = SUI_COIN_TYPE
    ) -> dict[str, Any]:
        """Get the total balance of one coin type held by *owner*."""
        return await self.rpc_call("suix_getBalance", [owner, coin_type])

    async def dev_inspect_transaction_block(
        self, sender: str, tx_kind_base64: str
    ) -> dict[str, Any]:
        """Simulate a transaction kind without committing it."""
        logger.debug("devInspect as %s (%d chars)", sender, len(tx_kind_base64))
        return await self.rpc_call(
            "sui_devInspectTransactionBlock", [sender, tx_kind_base64, None, None]
        )
