"""Rate conversions used by the projection engine."""


def monthly_rate(annual_real_pct: float) -> float:
    """Convert an annual real return in percent (e.g. 5 for 5%) into the
    equivalent monthly compounding rate as a decimal.

    Callers must keep ``annual_real_pct`` above -100; at or below that the
    base is non-positive and the result is not a finite real number.
    """
    return (1 + annual_real_pct / 100) ** (1 / 12) - 1


def monthly_rate_from_decimal(annual_rate: float) -> float:
    """Same conversion for an annual rate already expressed as a decimal."""
    return (1 + annual_rate) ** (1 / 12) - 1
