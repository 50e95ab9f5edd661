"""Protocol interfaces for the lending pool client."""
from .chain import ChainClient
from .notifier import Notifier
from .signer import TransactionSigner

__all__ = ["ChainClient", "Notifier", "TransactionSigner"]
