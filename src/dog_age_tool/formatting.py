"""Redondeo a un decimal y armado del mensaje de resultado."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

DEFAULT_SUBJECT = "妙麗"

_ONE_DECIMAL = Decimal("0.1")


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, ties away from zero.

    The float is rounded through its shortest repr, so ``1.05`` gives ``1.1``
    even though its binary value is slightly below 1.05. Non-finite values are
    returned unchanged.

    Args:
        value: Number to round.

    Returns:
        Rounded float.
    """
    number = float(value)
    if not math.isfinite(number):
        return number
    rounded = Decimal(repr(number)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    # + 0.0 turns -0.0 into 0.0.
    return float(rounded) + 0.0


def format_one_decimal(value: float) -> str:
    """Texto con exactamente un decimal (``2`` -> ``"2.0"``)."""
    return f"{round_one_decimal(value):.1f}"


def _is_blank(value: float) -> bool:
    # 0 and NaN count as "no result".
    return not value or math.isnan(value)


def render_result(
    dog_age: float | None,
    human_age: float | None,
    subject: str = DEFAULT_SUBJECT,
) -> str:
    """Build the result message with bold numbers.

    Returns an empty string when either age is missing, zero or NaN; a real
    zero age is indistinguishable from "no result".
    """
    if dog_age is None or human_age is None:
        return ""
    if _is_blank(dog_age) or _is_blank(human_age):
        return ""
    dog_str = f"<strong>{format_one_decimal(dog_age)}</strong>"
    human_str = f"<strong>{format_one_decimal(human_age)}</strong>"
    return (
        f"{subject} 現在大約 {dog_str} 歲狗年齡，<br>"
        f"換算成人類年齡大約是 {human_str} 歲。"
    )
