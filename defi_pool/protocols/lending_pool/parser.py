"""Pure parsing functions for lending pool RPC responses — no I/O."""
from __future__ import annotations

from typing import Any

from ...chains.sui.bcs import decode_u64_le
from ...exceptions import SimulationError
from ...units import to_display_units


def parse_pool_balance(object_response: dict[str, Any]) -> str:
    """Read the pool's ``deposits`` field in SUI, or ``"0"`` if unreadable.

    Only ``moveObject`` content carries typed fields; anything else (package,
    missing content, deleted object) reports an empty pool.
    """
    content = (object_response.get("data") or {}).get("content") or {}
    if content.get("dataType") != "moveObject":
        return "0"
    fields = content.get("fields") or {}
    return to_display_units(fields.get("deposits") or "0")


def parse_balance(balance_response: dict[str, Any]) -> str:
    """Convert a ``suix_getBalance`` response to SUI."""
    return to_display_units(balance_response.get("totalBalance", "0"))


def parse_u64_return(inspect_response: dict[str, Any]) -> int:
    """Decode the first return value of the first command as a u64.

    Raises:
        SimulationError: execution failed or produced no return value.
    """
    error = inspect_response.get("error")
    if error:
        raise SimulationError(f"devInspect execution failed: {error}")

    results = inspect_response.get("results") or []
    if not results or not results[0].get("returnValues"):
        raise SimulationError("devInspect returned no return values")

    raw_bytes, _type_tag = results[0]["returnValues"][0]
    return decode_u64_le(raw_bytes)
