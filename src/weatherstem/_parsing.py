"""Tolerant numeric parsing shared by the normalizer and the models."""

from __future__ import annotations

import math


def parse_float_or_zero(value: str | None) -> float:
    """Parse a string-encoded number, returning 0.0 when it cannot be parsed.

    This loses data on purpose. A station that is down replaces its numeric
    fields with sentinel strings, and one bad field must not keep the other
    stations from being shown. No error is raised or logged.

    Surrounding whitespace and digit-group underscores are rejected too,
    although float() would accept them.
    """
    if value is None or value != value.strip() or "_" in value:
        return 0.0
    try:
        result = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(result) or math.isinf(result):
        return 0.0
    return result
