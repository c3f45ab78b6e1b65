"""
Temporal worker: polls the statement task queue.

The worker registers StatementWorkflow and the deliver_statement activity.
Multiple workers can poll the same task queue for horizontal scaling.

Run with:
    python -m theater_billing.worker
"""

import asyncio
import logging

from temporalio.client import Client

# The same data_converter must be used on both the worker AND the client,
# otherwise Pydantic payloads fail to deserialize.
from temporalio.contrib.pydantic import pydantic_data_converter
from temporalio.worker import Worker

from theater_billing.activities import deliver_statement
from theater_billing.config import Settings, configure_logging
from theater_billing.workflows import StatementWorkflow


async def run_worker(settings: Settings) -> None:
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    client = await Client.connect(settings.temporal_address, data_converter=pydantic_data_converter)
    logger.info("Connected to Temporal at %s, starting worker on queue %r", settings.temporal_address, settings.task_queue)

    worker = Worker(
        client,
        task_queue=settings.task_queue,
        workflows=[StatementWorkflow],
        activities=[deliver_statement],
    )
    # worker.run() blocks until the worker is shut down (e.g., via Ctrl+C).
    await worker.run()


def main() -> None:
    asyncio.run(run_worker(Settings.from_env()))


if __name__ == "__main__":
    main()
