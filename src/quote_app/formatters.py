"""pt-BR rendering of monetary and percent values.

Presentation must never fail on a bad number: ``None``, NaN and infinities
render as the canonical zero string.
"""

from __future__ import annotations

import math
from typing import Optional

ZERO_CURRENCY = "R$ 0,00"
ZERO_PERCENT = "0,00%"
ZERO_NUMBER = "0,00"


def _is_renderable(value: Optional[float]) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except (TypeError, OverflowError):
        return False


def format_number(value: Optional[float], decimals: int = 2) -> str:
    """1234.5 -> '1.234,50'."""
    if not _is_renderable(value):
        value = 0.0
    text = f"{value:,.{decimals}f}".replace(",", "X").replace(".", ",").replace("X", ".")
    # "-0,00" is not a meaningful rendering
    if text.lstrip("-").strip("0.,") == "":
        text = text.lstrip("-")
    return text


def format_currency(value: Optional[float]) -> str:
    """1234.5 -> 'R$ 1.234,50'; negatives render as '-R$ 1.234,50'."""
    if not _is_renderable(value):
        return ZERO_CURRENCY
    body = format_number(abs(value))
    if value < 0 and body != ZERO_NUMBER:
        return f"-R$ {body}"
    return f"R$ {body}"


def format_percent(value: Optional[float]) -> str:
    """12.345 -> '12,35%'. The input is already a percent, not a fraction."""
    if not _is_renderable(value):
        return ZERO_PERCENT
    return f"{format_number(value)}%"
