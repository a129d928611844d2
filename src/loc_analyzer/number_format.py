"""Number and duration formatting for reports.

Rounding follows Python's ``round`` / ``format`` behaviour, i.e.
round-half-to-even on the binary value. Every formatter in the package
goes through these three functions so the rule is applied consistently.
"""

# Decimal (SI) prefixes, base 1000.
DECIMAL_PREFIXES = ("", "K", "M", "G", "T", "P", "E", "Z", "Y")


def format_count(n: int) -> str:
    """Render a count with a decimal prefix.

    Counts below 1000 are rendered as plain integers. Larger counts get one
    fractional digit and a prefix letter: ``1500 -> "1.5K"``. When rounding
    lifts the mantissa to 1000.0 it rolls over to the next prefix, so
    ``999_999 -> "1.0M"`` rather than ``"1000.0K"``.
    """
    if n < 0:
        raise ValueError(f"count must be non-negative, got {n}")
    if n < 1000:
        return str(int(n))

    mantissa = float(n)
    index = 0
    while mantissa >= 1000 and index < len(DECIMAL_PREFIXES) - 1:
        mantissa /= 1000
        index += 1

    if round(mantissa, 1) >= 1000 and index < len(DECIMAL_PREFIXES) - 1:
        mantissa /= 1000
        index += 1

    return f"{mantissa:.1f}{DECIMAL_PREFIXES[index]}"


def format_duration(seconds: float) -> str:
    """Render an elapsed time with a unit picked by magnitude.

    Lower bounds are inclusive: exactly 60.0 seconds is ``"1.000 minutes"``.
    """
    if seconds >= 3600:
        return f"{seconds / 3600:.3f} hours"
    if seconds >= 60:
        return f"{seconds / 60:.3f} minutes"
    if seconds >= 1:
        return f"{seconds:.3f} seconds"
    if seconds >= 0.001:
        return f"{seconds * 1000:.3f} ms"
    return f"{seconds * 1_000_000:.3f} µs"


def calculate_percentage(part: int, total: int) -> float:
    """Share of ``part`` in ``total`` as a percentage with 2 decimals.

    Returns 0.0 for an empty total.
    """
    if total == 0:
        return 0.0
    return round((part / total) * 10000) / 100
