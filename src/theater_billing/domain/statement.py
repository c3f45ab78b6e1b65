"""
Statement engine: prices an invoice against a catalog and renders the text.

The engine is a pure function of (Catalog, Invoice). It is safe to run
inside a Temporal workflow and to share between callers, since neither input
is mutated.

Every line is computed before anything is rendered, so a missing play or an
unknown play type fails the whole statement with no partial output.

Lines end in "\n". Text-mode streams translate it to the platform line
ending when the statement is written out.
"""

from theater_billing.domain.formatting import usd
from theater_billing.domain.models import Catalog, Invoice, StatementData, StatementLine
from theater_billing.domain.pricing import PricingStrategy, StandardPricingStrategy


class StatementEngine:
    """Computes and renders statements for invoices priced against `catalog`."""

    def __init__(
        self,
        catalog: Catalog,
        pricing: PricingStrategy | None = None,
        line_separator: str = "\n",
    ) -> None:
        self.catalog = catalog
        # Strategy pattern: swap in a different pricing strategy if needed.
        self.pricing: PricingStrategy = pricing or StandardPricingStrategy()
        self.line_separator = line_separator

    def compute(self, invoice: Invoice) -> StatementData:
        """Price every performance and aggregate the totals."""
        lines = []
        for performance in invoice.performances:
            play = self.catalog.resolve(performance.play_id)
            lines.append(
                StatementLine(
                    play_name=play.name,
                    audience=performance.audience,
                    amount_cents=self.pricing.amount_cents(play, performance),
                    volume_credits=self.pricing.volume_credits(play, performance),
                )
            )

        return StatementData(
            customer=invoice.customer,
            lines=tuple(lines),
            total_amount_cents=sum(line.amount_cents for line in lines),
            total_volume_credits=sum(line.volume_credits for line in lines),
        )

    def total_amount(self, invoice: Invoice) -> int:
        """Total amount owed, in cents."""
        return self.compute(invoice).total_amount_cents

    def total_volume_credits(self, invoice: Invoice) -> int:
        return self.compute(invoice).total_volume_credits

    def render(self, data: StatementData) -> str:
        """Render computed statement data as plain text."""
        out = [f"Statement for {data.customer}"]
        for line in data.lines:
            out.append(f"  {line.play_name}: {usd(line.amount_cents)} ({line.audience} seats)")
        out.append(f"Amount owed is {usd(data.total_amount_cents)}")
        out.append(f"You earned {data.total_volume_credits} credits")
        return "".join(text + self.line_separator for text in out)

    def statement(self, invoice: Invoice) -> str:
        """Return the formatted statement for `invoice`.

        Raises:
            PlayNotFoundError: If a performance references an unknown play id.
            UnknownPlayTypeError: If a play's type has no pricing rule.
        """
        return self.render(self.compute(invoice))
