"""Transaction builders for the ``defi`` lending pool module — pure, no I/O."""
from __future__ import annotations

from collections.abc import Callable

from ...chains.sui.transaction import TransactionRequest
from ...models import OperationKind, TransactionParams
from ...units import to_base_units

MODULE = "defi"


def _target(package_id: str, function: str) -> str:
    return f"{package_id}::{MODULE}::{function}"


def _build_coin_call(params: TransactionParams, function: str) -> TransactionRequest:
    """Split the amount off the gas coin and pass the new coin to *function*."""
    tx = TransactionRequest()
    [coin] = tx.split_coins(tx.gas, [to_base_units(params.amount)])
    tx.move_call(
        _target(params.package_id, function),
        [tx.object(params.pool_id), coin],
    )
    return tx


def build_deposit(params: TransactionParams) -> TransactionRequest:
    """``deposit(pool, coin)`` funded by a coin split from gas."""
    return _build_coin_call(params, "deposit")


def build_borrow(params: TransactionParams) -> TransactionRequest:
    """``borrow(pool, amount)`` — the contract sends the borrowed coin back."""
    tx = TransactionRequest()
    tx.move_call(
        _target(params.package_id, "borrow"),
        [tx.object(params.pool_id), tx.pure_u64(to_base_units(params.amount))],
    )
    return tx


def build_repay(params: TransactionParams) -> TransactionRequest:
    """``repay(pool, coin)`` funded by a coin split from gas."""
    return _build_coin_call(params, "repay")


def build_get_debt(
    package_id: str, pool_id: str, user_address: str
) -> TransactionRequest:
    """Read-only ``get_debt(pool, address)`` used with devInspect."""
    tx = TransactionRequest()
    tx.move_call(
        _target(package_id, "get_debt"),
        [tx.object(pool_id, mutable=False), tx.pure_address(user_address)],
    )
    return tx


_BUILDERS: dict[str, Callable[[TransactionParams], TransactionRequest]] = {
    "deposit": build_deposit,
    "borrow": build_borrow,
    "repay": build_repay,
}


def build_request(
    operation: OperationKind, params: TransactionParams
) -> TransactionRequest:
    builder = _BUILDERS.get(operation)
    if builder is None:
        raise ValueError(f"Unknown pool operation: {operation!r}")
    return builder(params)
