"""Conversions between SUI display amounts and MIST base units — no I/O."""
from __future__ import annotations

from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, localcontext

SUI_DECIMALS = 9
MIST_PER_SUI = 10**SUI_DECIMALS

_SCALE = Decimal(MIST_PER_SUI)
_DISPLAY_QUANTUM = Decimal("0.0001")


def to_base_units(display_amount: str | int | float | Decimal) -> int:
    """Convert a SUI amount to MIST, truncating anything past 9 decimals.

    The input is expected to be validated already (finite, non-negative).

    Examples:
        "2.5" → 2500000000
        "0.1234567891" → 123456789
    """
    amount = Decimal(str(display_amount))
    with localcontext() as ctx:
        # scaleb rounds to context precision; keep every input digit
        ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + SUI_DECIMALS)
        scaled = amount.scaleb(SUI_DECIMALS)
    return int(scaled.to_integral_value(rounding=ROUND_DOWN))


def to_display_units(base_amount: str | int) -> str:
    """Convert MIST to a SUI string with exactly 4 fractional digits."""
    amount = Decimal(str(base_amount)) / _SCALE
    return str(amount.quantize(_DISPLAY_QUANTUM, rounding=ROUND_HALF_UP))
