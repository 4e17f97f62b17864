"""Byte-size helpers for binary units."""

_UNIT = 1024


def _check(num: int) -> int:
    if num < 0:
        raise ValueError(f"size must be non-negative, got {num}")
    return num


def kilobytes(num: int) -> int:
    """Return the number of bytes in ``num`` kibibytes."""
    return _check(num) * _UNIT


def megabytes(num: int) -> int:
    """Return the number of bytes in ``num`` mebibytes."""
    return kilobytes(num) * _UNIT


def gigabytes(num: int) -> int:
    """Return the number of bytes in ``num`` gibibytes."""
    return megabytes(num) * _UNIT