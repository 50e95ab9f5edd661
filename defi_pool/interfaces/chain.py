"""Chain client protocol — blockchain RPC abstraction."""
from typing import Any, Protocol


class ChainClient(Protocol):
    """Abstract interface for blockchain RPC interactions."""

    async def get_object(self, object_id: str) -> dict[str, Any]: ...

    async def get_balance(self, owner: str, coin_type: str = ...) -> dict[str, Any]: ...

    async def dev_inspect_transaction_block(
        self, sender: str, tx_kind_base64: str
    ) -> dict[str, Any]: ...
