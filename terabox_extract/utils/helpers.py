"""
Helper utility functions.
"""
from typing import Union

SIZE_UNITS = ["Bytes", "KB", "MB", "GB", "TB"]


def format_size(size_bytes: Union[int, float]) -> str:
    """
    Format bytes to human-readable size.

    The value is rounded to two decimals with trailing zeros dropped,
    e.g. ``1536 -> "1.5 KB"``.
    """
    if size_bytes <= 0:
        return "0 Bytes"

    # floor(log1024(size)) without float log error at exact powers
    i = 0
    while i < len(SIZE_UNITS) - 1 and size_bytes >= 1024 ** (i + 1):
        i += 1

    divisor = 1024 ** i
    if isinstance(size_bytes, int):
        # integer rounding, half up; sizes past float range stay exact
        hundredths = (size_bytes * 200 + divisor) // (2 * divisor)
        number = f"{hundredths // 100}.{hundredths % 100:02d}"
    else:
        number = f"{round(size_bytes / divisor, 2):.2f}"

    number = number.rstrip("0").rstrip(".")
    return f"{number} {SIZE_UNITS[i]}"


def to_int(value, default: int = 0) -> int:
    """Coerce a JSON value to int, falling back to ``default``."""
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default
