"""SUI chain client and transaction encoding."""
from .client import SUI_COIN_TYPE, SuiClient
from .transaction import SharedObjectArg, TransactionRequest, shared_object_arg

__all__ = [
    "SUI_COIN_TYPE",
    "SharedObjectArg",
    "SuiClient",
    "TransactionRequest",
    "shared_object_arg",
]
