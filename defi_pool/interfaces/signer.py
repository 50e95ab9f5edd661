"""Transaction signer protocol — wallet signing and submission abstraction."""
from typing import Any, Protocol

from ..chains.sui.transaction import TransactionRequest


class TransactionSigner(Protocol):
    """Signs and submits a transaction request, returning the execution result.

    The result must carry the committed transaction's ``digest``. Rejections
    by the wallet, RPC errors and contract aborts are raised as exceptions.
    """

    async def sign_and_execute(self, request: TransactionRequest) -> dict[str, Any]: ...
