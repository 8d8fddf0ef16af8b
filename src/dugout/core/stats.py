"""Stat formatting for display cells."""

import math

PLACEHOLDER = "-"


def format_stat(value, decimals: int = 0) -> str:
    """Normalize a raw stat value into a display string.

    Missing values (None or "") render as the placeholder. With
    ``decimals > 0`` the value is coerced to a number and rendered
    fixed-point; anything that does not coerce renders as the placeholder.
    With ``decimals == 0`` the value passes through as-is, which keeps
    pre-formatted strings such as ``".000"`` intact.
    """
    if value is None or value == "":
        return PLACEHOLDER
    if decimals > 0:
        # float() accepts digit separators, feed numbers never carry them
        if isinstance(value, str) and "_" in value:
            return PLACEHOLDER
        try:
            num = float(value)
        except (TypeError, ValueError):
            return PLACEHOLDER
        if not math.isfinite(num):
            return PLACEHOLDER
        return f"{num:.{decimals}f}"
    return str(value)
