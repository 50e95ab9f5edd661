"""Unit tests for amount validation."""
from __future__ import annotations

import pytest

from defi_pool.exceptions import ValidationError
from defi_pool.validation import require_valid_amount, validate_amount


class TestValidateAmount:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            ("", False),
            ("   ", False),
            ("0", False),
            ("-1", False),
            ("abc", False),
            ("NaN", False),
            ("Infinity", False),
            ("1.5", True),
            ("0.0001", True),
            (" 2 ", True),
            ("1_000", False),
            ("0x10", False),
            ("\u0661", False),
            ("1e3", True),
            (".5", True),
            ("5.", True),
        ],
    )
    def test_table(self, amount: str, expected: bool) -> None:
        assert validate_amount(amount) is expected


class TestRequireValidAmount:
    def test_returns_stripped_amount(self) -> None:
        assert require_valid_amount(" 1.5 ") == "1.5"

    def test_raises_on_invalid(self) -> None:
        with pytest.raises(ValidationError, match="valid amount"):
            require_valid_amount("0")
