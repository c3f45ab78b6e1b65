"""
Tariff: the numeric constants behind the pricing and credit rules.

Amounts are integer cents. A Tariff is immutable and injected into the
pricing strategy, so tests can price against an alternate tariff without
touching module globals.
"""

from pydantic import BaseModel, ConfigDict, Field


class Tariff(BaseModel):
    """Prices, thresholds and credit rules, all in integer units."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Tragedy
    tragedy_base_amount: int = 40_000                 # $400.00
    tragedy_audience_threshold: int = 30
    tragedy_over_base_capacity_per_person: int = 1_000  # $10.00

    # Comedy
    comedy_base_amount: int = 30_000                  # $300.00
    comedy_audience_threshold: int = 20
    comedy_over_base_capacity_amount: int = 10_000    # $100.00
    comedy_over_base_capacity_per_person: int = 500   # $5.00
    comedy_amount_per_audience: int = 300             # $3.00

    # Volume credits
    base_volume_credit_threshold: int = 30
    comedy_extra_volume_factor: int = Field(5, gt=0)


DEFAULT_TARIFF = Tariff()
