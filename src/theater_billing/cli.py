"""
Local CLI: print statements without a Temporal server.

Usage:
    theater-statement --plays plays.json --invoices invoices.json
"""

import argparse
import logging
import sys

from theater_billing.config import Settings, configure_logging
from theater_billing.domain.errors import BillingError
from theater_billing.domain.statement import StatementEngine
from theater_billing.services.repository import InvoiceRepository, PlayRepository

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print theater billing statements")
    parser.add_argument("--plays", required=True, help="Path to plays.json")
    parser.add_argument("--invoices", required=True, help="Path to invoices.json")
    parser.add_argument("--log-level", default=None, help="Logging level (default: THEATER_LOG_LEVEL or INFO)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging((args.log_level or Settings.from_env().log_level).upper())

    engine = StatementEngine(PlayRepository(args.plays).load())
    invoices = InvoiceRepository(args.invoices).load()

    try:
        # Render everything first: a bad invoice produces no output at all.
        statements = [engine.statement(invoice) for invoice in invoices]
    except BillingError as err:
        logger.error("Cannot produce statements: %s", err)
        return 1

    for text in statements:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
