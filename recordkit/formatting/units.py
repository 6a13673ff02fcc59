"""Human-readable formatting of byte counts and nanosecond durations."""

import time
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Sequence, Tuple

BYTE_UNITS: Tuple[str, ...] = ('Bytes', 'KB', 'MB', 'GB', 'TB', 'PB', 'EB', 'ZB', 'YB')

# (unit size in nanoseconds, digits in the unit size minus one, suffix), largest first
DURATION_TIERS: Tuple[Tuple[int, int, str], ...] = (
    (10 ** 9, 9, 's'),
    (10 ** 6, 6, 'ms'),
    (10 ** 3, 3, 'μs'),
    (1, 0, 'ns'),
)


def _log1024(count: int) -> int:
    """Floor of log base 1024 for a positive integer, exact for any size."""
    return (count.bit_length() - 1) // 10


def format_bytes(count: int, decimals: int = 2, units: Sequence[str] = BYTE_UNITS) -> str:
    """
    Format a byte count with a binary unit suffix.
    
    Parameters
    ----------
    count : int
        Non-negative number of bytes
    decimals : int
        Maximum number of decimal places kept after rounding
    units : Sequence[str]
        Unit names, each 1024 times the previous one
        
    Returns
    -------
    str
        e.g. ``"0 Bytes"``, ``"1 KB"``, ``"1.5 MB"``
    """
    if count == 0:
        return f'0 {units[0]}'
    
    places = max(decimals, 0)
    index = min(_log1024(count), len(units) - 1)
    
    # Enough precision for every integer digit plus the kept decimals
    with localcontext() as ctx:
        ctx.prec = len(str(count)) + places + 2
        scaled = Decimal(count) / Decimal(1024 ** index)
        rounded = scaled.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    
    text = format(rounded, 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    
    return f'{text} {units[index]}'


def format_nanoseconds(count: int) -> str:
    """
    Format a nanosecond count using ns, μs, ms or s.
    
    Seconds is the largest unit, so 1000 seconds prints as ``"1000s"``.
    Only integer arithmetic is used; values that are not a whole multiple
    of their unit keep every significant digit (``1500 -> "1.5μs"``).
    """
    for size, digits, suffix in DURATION_TIERS:
        if count >= size:
            break
    
    whole, remainder = divmod(count, size)
    if remainder == 0:
        return f'{whole}{suffix}'
    
    fraction = str(remainder).zfill(digits).rstrip('0')
    return f'{whole}.{fraction}{suffix}'


def now_nanoseconds() -> int:
    """Monotonic clock reading in nanoseconds."""
    return time.perf_counter_ns()
