"""
Statement delivery service facade.

Writes a rendered statement to a text file. In production this would hand
the statement to a mailer or a document store; the activity layer only sees
`deliver()`.
"""

import asyncio
import logging
import re
from pathlib import Path

from theater_billing.domain.models import StatementDelivery

logger = logging.getLogger(__name__)


def slugify(value: str) -> str:
    """Reduce a customer name to a safe file-name fragment."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")
    return slug or "customer"


class StatementDeliveryService:
    """Writes statements to `<output_dir>/<customer-slug>-<statement_id>.txt`."""

    async def deliver(self, input: StatementDelivery) -> str:
        path = Path(input.output_dir) / f"{slugify(input.customer)}-{slugify(input.statement_id)}.txt"
        logger.info("Delivering statement %s for %s to %s", input.statement_id, input.customer, path)
        await asyncio.to_thread(_write, path, input.text)
        logger.info("Statement %s delivered", input.statement_id)
        return str(path)


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps the statement's own line separators untouched.
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)
