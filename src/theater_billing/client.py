"""
CLI client: starts one StatementWorkflow per invoice and prints the results.

Plays and invoices are loaded here, at the edge, and shipped to the workflow
as part of its input so the workflow itself does no I/O.

Usage:
    # Price every invoice in the file:
    python -m theater_billing.client --batch-id 2024-06 --plays plays.json --invoices invoices.json

    # Start + query each workflow's state once:
    python -m theater_billing.client --batch-id 2024-06 --plays plays.json --invoices invoices.json --query
"""

import argparse
import asyncio
import logging
import sys

from temporalio.client import Client, WorkflowFailureError, WorkflowHandle

# Must match the data_converter used by the worker, see worker.py.
from temporalio.contrib.pydantic import pydantic_data_converter

from theater_billing.config import Settings, configure_logging
from theater_billing.domain.models import StatementRequest
from theater_billing.services.repository import InvoiceRepository, PlayRepository
from theater_billing.workflows import StatementWorkflow

logger = logging.getLogger(__name__)


async def print_results(handles: list[WorkflowHandle]) -> int:
    """Print each workflow result; log the ones that failed.

    Returns the process exit code: 1 if any statement was rejected.
    """
    failed = 0
    for handle in handles:
        try:
            result = await handle.result()
        except WorkflowFailureError as err:
            logger.error("Workflow %s failed: %s", handle.id, err.cause)
            failed += 1
            continue
        print(result.model_dump_json(indent=2))
    return 1 if failed else 0


async def run_client(args: argparse.Namespace, settings: Settings) -> int:
    configure_logging(settings.log_level)

    catalog = PlayRepository(args.plays).load()
    invoices = InvoiceRepository(args.invoices).load()

    client = await Client.connect(settings.temporal_address, data_converter=pydantic_data_converter)

    handles = []
    for n, invoice in enumerate(invoices, start=1):
        req = StatementRequest(
            statement_id=f"{args.batch_id}-{n}",
            invoice=invoice,
            catalog=catalog,
            output_dir=args.output_dir or settings.output_dir,
        )
        workflow_id = f"statement-{req.statement_id}"
        logger.info("Starting workflow %s for %s", workflow_id, invoice.customer)
        handle = await client.start_workflow(
            StatementWorkflow.run,
            req,
            id=workflow_id,  # unique workflow ID (prevents duplicate statements)
            task_queue=settings.task_queue,
        )
        if args.query:
            status = await handle.query(StatementWorkflow.get_status)
            logger.info("Query result: %s", status)
        handles.append(handle)

    return await print_results(handles)


def main() -> None:
    parser = argparse.ArgumentParser(description="Compute theater statements via Temporal")
    parser.add_argument("--batch-id", required=True, help="Prefix for statement and workflow ids")
    parser.add_argument("--plays", required=True, help="Path to plays.json")
    parser.add_argument("--invoices", required=True, help="Path to invoices.json")
    parser.add_argument("--output-dir", default=None, help="Directory statements are delivered to")
    parser.add_argument("--query", action="store_true", help="Query each workflow's status once after starting")
    sys.exit(asyncio.run(run_client(parser.parse_args(), Settings.from_env())))


if __name__ == "__main__":
    main()
