"""Service modules"""
from .pool_service import PoolService
from .result_handler import TransactionResultHandler, explorer_url

__all__ = ["PoolService", "TransactionResultHandler", "explorer_url"]
