"""Amount validation performed before any network call."""
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from .exceptions import ValidationError

_PLAIN_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def validate_amount(amount: str) -> bool:
    """Return True when *amount* is a finite number greater than zero."""
    if not amount or not amount.strip():
        return False
    text = amount.strip()
    if not _PLAIN_DECIMAL.fullmatch(text):
        return False
    try:
        value = Decimal(text)
    except InvalidOperation:
        return False
    return value.is_finite() and value > 0


def require_valid_amount(amount: str) -> str:
    """Return the stripped amount or raise ``ValidationError``."""
    if not validate_amount(amount):
        raise ValidationError("Please enter a valid amount")
    return amount.strip()
