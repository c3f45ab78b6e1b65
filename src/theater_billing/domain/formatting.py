"""Currency formatting for statements."""

CENTS_PER_DOLLAR = 100


def usd(amount_cents: int) -> str:
    """Format integer cents as US dollars, e.g. 123456 -> "$1,234.56".

    Integer arithmetic only, so large amounts never pick up float error.
    """
    sign = "-" if amount_cents < 0 else ""
    dollars, cents = divmod(abs(amount_cents), CENTS_PER_DOLLAR)
    return f"{sign}${dollars:,}.{cents:02d}"
