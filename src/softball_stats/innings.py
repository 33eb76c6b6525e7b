"""Innings-pitched codec.

Innings are written as ``whole.outs``: the digit after the dot counts the
extra outs recorded in the next inning (0, 1 or 2), not tenths. ``4.1`` is
four innings and one out, ``4.2`` four innings and two outs, and ``4.3``
never occurs because the third out completes inning five.

Outs are the linear unit. Convert to outs before adding or dividing and
convert back for display.
"""

import logging
import math
import re

logger = logging.getLogger(__name__)

_INNINGS_PATTERN = re.compile(r"\d+(\.[12])?")


def _coerce(value: float | int | str | None) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        number = float(value)
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def parse_innings(value: float | int | str | None) -> float:
    """Read an entered innings value as a display float without normalizing it.

    ``"5.3"`` stays ``5.3`` so it can still be flagged. Malformed and negative
    input reads as ``0.0``.
    """
    number = _coerce(value)
    if number is None or number < 0:
        logger.debug("Treating innings value %r as 0.0", value)
        return 0.0
    return number


def outs_from_display(value: float | int | str | None) -> int:
    """Convert a display innings value (``6.2`` or ``"6.2"``) to total outs.

    Malformed and negative input converts to 0 outs.
    """
    number = _coerce(value)
    if number is None or number < 0:
        logger.debug("Treating innings value %r as 0 outs", value)
        return 0
    whole, _, digit = f"{number:.1f}".partition(".")
    return int(whole) * 3 + int(digit)


def display_from_outs(outs: int) -> float:
    """Convert an out count to display innings: 22 outs -> ``7.1``."""
    if outs <= 0:
        return 0.0
    whole, remainder = divmod(int(outs), 3)
    return round(whole + remainder / 10, 1)


def normalize(value: float | int | str | None) -> float:
    """Round-trip a display value through outs so ``5.3`` becomes ``6.0``."""
    return display_from_outs(outs_from_display(value))


def innings_from_outs(outs: int) -> float:
    """True innings for rate stats: 22 outs -> 7.333..."""
    if outs <= 0:
        return 0.0
    return outs / 3


def is_valid_innings(text: str) -> bool:
    """Strict check for entered innings text: digits, optionally ``.1`` or ``.2``."""
    return _INNINGS_PATTERN.fullmatch(text) is not None


def format_innings(value: float | int | str | None) -> str:
    if value is None:
        return "0.0"
    return f"{normalize(value):.1f}"
