"""
Pricing strategies (Strategy pattern).

The statement engine holds a reference to `PricingStrategy` (a Protocol) and
calls `amount_cents()` and `volume_credits()` per performance. A different
tariff is injected into `StandardPricingStrategy`; a different rule set is a
new class satisfying the protocol.

IMPORTANT: Pricing runs directly inside the statement workflow (not in an
activity), so it MUST be deterministic: no I/O, no randomness, no system
clock.
"""

from typing import Protocol

from theater_billing.domain.errors import UnknownPlayTypeError
from theater_billing.domain.models import Performance, Play, PlayType
from theater_billing.domain.tariff import DEFAULT_TARIFF, Tariff


class PricingStrategy(Protocol):
    """Interface for pricing a single performance.

    Any class with these two methods satisfies this protocol (structural
    subtyping, no explicit inheritance needed).
    """

    def amount_cents(self, play: Play, performance: Performance) -> int: ...

    def volume_credits(self, play: Play, performance: Performance) -> int: ...


def play_type_of(play: Play) -> PlayType:
    """Return the PlayType of `play`, or raise UnknownPlayTypeError."""
    try:
        return PlayType(play.type)
    except ValueError:
        raise UnknownPlayTypeError(play.type) from None


class StandardPricingStrategy:
    """Default pricing: base amount per type plus audience surcharges.

    Examples (default tariff):
        - Hamlet (tragedy), 55 seats:
              40000 + 1000 * (55 - 30) = 65000 cents ($650.00), 25 credits
        - As You Like It (comedy), 35 seats:
              30000 + 10000 + 500 * (35 - 20) + 300 * 35 = 58000 cents ($580.00),
              (35 - 30) + 35 // 5 = 12 credits
    """

    def __init__(self, tariff: Tariff = DEFAULT_TARIFF) -> None:
        self.tariff = tariff

    def amount_cents(self, play: Play, performance: Performance) -> int:
        t = self.tariff
        audience = performance.audience

        match play_type_of(play):
            case PlayType.TRAGEDY:
                result = t.tragedy_base_amount
                if audience > t.tragedy_audience_threshold:
                    result += t.tragedy_over_base_capacity_per_person * (
                        audience - t.tragedy_audience_threshold
                    )
            case PlayType.COMEDY:
                result = t.comedy_base_amount
                if audience > t.comedy_audience_threshold:
                    result += t.comedy_over_base_capacity_amount + t.comedy_over_base_capacity_per_person * (
                        audience - t.comedy_audience_threshold
                    )
                result += t.comedy_amount_per_audience * audience

        return result

    def volume_credits(self, play: Play, performance: Performance) -> int:
        # Unknown types earn the base term; pricing is what rejects them.
        t = self.tariff
        result = max(performance.audience - t.base_volume_credit_threshold, 0)
        if play.type == PlayType.COMEDY:
            result += performance.audience // t.comedy_extra_volume_factor
        return result
