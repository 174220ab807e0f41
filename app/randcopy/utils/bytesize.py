"""Human readable rendering of byte counts.

Sizes are expressed in base-1024 units (``B``, ``KB``, ``MB``, ``GB``,
``TB``) with a bounded number of decimals and no digit grouping, for
example ``"1.5 KB"`` or ``"731 B"``.
"""

from decimal import ROUND_CEILING, ROUND_HALF_EVEN, Decimal

from randcopy.errors import InvalidArgumentError

BYTE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB")

# Decimals used in per-file progress lines and in the final summary
PROGRESS_DECIMALS = 2
SUMMARY_DECIMALS = 4


def byte_size_string(
    num_bytes: int,
    max_decimals: int = 0,
    rounding: str = ROUND_HALF_EVEN,
) -> str:
    """Render a byte count with the largest unit keeping the value >= 1.

    The value is divided by 1024 while it is at least 1024 and a larger
    unit exists, then rounded to ``max_decimals`` digits. Trailing zeros
    of the fraction are dropped.

    Args:
        num_bytes: Byte count to render.
        max_decimals: Maximum number of fractional digits.
        rounding: A ``decimal`` rounding mode such as ``ROUND_CEILING``.

    Returns:
        String of the form ``"<value> <unit>"``.

    Raises:
        InvalidArgumentError: If ``num_bytes`` or ``max_decimals`` is negative.
    """
    if num_bytes < 0:
        msg = f"Byte count cannot be negative, got {num_bytes}"
        raise InvalidArgumentError(msg)
    if max_decimals < 0:
        msg = f"Number of decimals cannot be negative, got {max_decimals}"
        raise InvalidArgumentError(msg)

    value = Decimal(num_bytes)
    unit = 0
    while value >= 1024 and unit < len(BYTE_UNITS) - 1:
        value /= 1024
        unit += 1

    rounded = value.quantize(Decimal(1).scaleb(-max_decimals), rounding=rounding)
    return f"{format(rounded.normalize(), 'f')} {BYTE_UNITS[unit]}"


def progress_size(num_bytes: int) -> str:
    """Render a size for a per-file progress line."""
    return byte_size_string(num_bytes, PROGRESS_DECIMALS, ROUND_CEILING)


def summary_size(num_bytes: int) -> str:
    """Render a size for the final summary line."""
    return byte_size_string(num_bytes, SUMMARY_DECIMALS, ROUND_CEILING)
