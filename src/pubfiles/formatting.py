# Human-readable byte sizes.
# Created: 2026-10-19

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")
_K = 1024


def format_size(size: int) -> str:
    """Format a byte count, e.g. ``1536`` -> ``"1.5 KB"``.

    The unit is ``floor(log_1024(size))`` capped at TB; the value is rounded
    half-up to two decimals and trailing zeros are dropped.
    """
    if size < 0:
        raise ValueError(f"Size cannot be negative: {size}")
    if size == 0:
        return "0 Bytes"

    # floor(log_1024(size)) without float error at exact powers
    index = min((int(size).bit_length() - 1) // 10, len(SIZE_UNITS) - 1)
    scaled = Decimal(size) / Decimal(_K**index)
    rounded = scaled.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[index]}"
