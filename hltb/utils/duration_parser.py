"""
Duration text parser for HowLongToBeat statistic cells.

The site renders the same quantity in two shapes:
- compact "26h 21m", "4h", "45m" (detail table cells)
- decimal hours "83 Hours", "59½ Hours" (some categories and older layouts)

Both are normalized to seconds. Anything that yields no usable number is None.
"""
from __future__ import annotations

import logging
import math
from typing import Optional

logger = logging.getLogger(__name__)

SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60

MISSING_MARKERS = ("", "-", "--")

VULGAR_FRACTIONS = {
    "½": ".5",
    "¼": ".25",
    "¾": ".75",
}


def _to_amount(token: str) -> Optional[float]:
    """Parse a numeric token; negatives, NaN and infinities count as unparseable."""
    try:
        value = float(token)
    except ValueError:
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


def _parse_decimal_hours(text: str) -> Optional[float]:
    token = text.split()[0]
    for fraction, decimal in VULGAR_FRACTIONS.items():
        token = token.replace(fraction, decimal)
    hours = _to_amount(token)
    if hours is None:
        logger.debug("Unparseable hour figure: %r", text)
        return None
    return hours * SECONDS_PER_HOUR


def _parse_compact(text: str) -> float:
    total = 0.0
    for token in text.split():
        if token.endswith("h"):
            unit = SECONDS_PER_HOUR
        elif token.endswith("m"):
            unit = SECONDS_PER_MINUTE
        else:
            continue
        amount = _to_amount(token[:-1])
        if amount is None:
            logger.debug("Skipping duration token %r in %r", token, text)
            continue
        total += amount * unit
    return total


def parse_duration(text: Optional[str]) -> Optional[float]:
    """
    Convert a duration cell to seconds.

    Returns None for "-", "--", blank cells, unparseable hour figures, and any
    compact value that sums to zero. A genuine zero-length duration is therefore
    indistinguishable from a missing one.
    """
    cleaned = (text or "").strip()
    if cleaned in MISSING_MARKERS:
        return None

    if "Hour" in cleaned:
        return _parse_decimal_hours(cleaned)

    total = _parse_compact(cleaned)
    if total == 0:
        return None
    return total


__all__ = ["parse_duration"]
