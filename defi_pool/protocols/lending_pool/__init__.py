"""Simple SUI lending pool (``defi`` Move module)."""
from .builder import (
    build_borrow,
    build_deposit,
    build_get_debt,
    build_repay,
    build_request,
)
from .reader import PoolStateReader

__all__ = [
    "PoolStateReader",
    "build_borrow",
    "build_deposit",
    "build_get_debt",
    "build_repay",
    "build_request",
]
