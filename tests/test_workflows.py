"""Tests for StatementWorkflow against Temporal's time-skipping test server.

deliver_statement is replaced by an in-memory activity registered under the
same name, so no files are written.

Run with: pytest tests/test_workflows.py -v
"""

import asyncio
import uuid

import pytest
from temporalio import activity
from temporalio.client import WorkflowFailureError
from temporalio.contrib.pydantic import pydantic_data_converter
from temporalio.exceptions import ApplicationError
from temporalio.testing import WorkflowEnvironment
from temporalio.worker import Worker

from theater_billing.domain.models import Catalog, Invoice, Performance, Play, StatementDelivery, StatementRequest
from theater_billing.workflows import StatementWorkflow

TASK_QUEUE = "theater-statements-test"

delivered: list[StatementDelivery] = []


@activity.defn(name="deliver_statement")
async def deliver_to_memory(input: StatementDelivery) -> str:
    delivered.append(input)
    return f"memory://{input.statement_id}"


@pytest.fixture(autouse=True)
def clear_delivered():
    delivered.clear()
    yield
    delivered.clear()


def make_request(catalog: Catalog, invoice: Invoice) -> StatementRequest:
    return StatementRequest(statement_id="2024-06-1", invoice=invoice, catalog=catalog, output_dir="unused")


def run_statement(req: StatementRequest):
    """Run the workflow to completion; return (result, status) or raise WorkflowFailureError."""

    async def go():
        async with await WorkflowEnvironment.start_time_skipping(data_converter=pydantic_data_converter) as env:
            async with Worker(
                env.client,
                task_queue=TASK_QUEUE,
                workflows=[StatementWorkflow],
                activities=[deliver_to_memory],
            ):
                handle = await env.client.start_workflow(
                    StatementWorkflow.run,
                    req,
                    id=f"statement-{uuid.uuid4()}",
                    task_queue=TASK_QUEUE,
                )
                result = await handle.result()
                status = await handle.query(StatementWorkflow.get_status)
                return result, status

    return asyncio.run(go())


class TestStatementWorkflow:
    def test_prices_and_delivers(self, catalog, big_co_invoice):
        result, status = run_statement(make_request(catalog, big_co_invoice))

        assert result.statement_id == "2024-06-1"
        assert result.customer == "BigCo"
        assert result.total_amount_cents == 173_000
        assert result.total_volume_credits == 47
        assert result.text.startswith("Statement for BigCo\n")
        assert result.text.endswith("Amount owed is $1,730.00\nYou earned 47 credits\n")
        assert result.delivered_to == "memory://2024-06-1"

        assert [d.text for d in delivered] == [result.text]
        assert delivered[0].output_dir == "unused"

        assert status == {
            "statement_id": "2024-06-1",
            "customer": "BigCo",
            "priced": True,
            "total_amount_cents": 173_000,
            "total_volume_credits": 47,
            "delivered_to": "memory://2024-06-1",
        }

    def test_empty_invoice(self, catalog):
        result, _ = run_statement(make_request(catalog, Invoice(customer="Nobody")))
        assert result.total_amount_cents == 0
        assert result.text == "Statement for Nobody\nAmount owed is $0.00\nYou earned 0 credits\n"


class TestRejectedStatements:
    """Bad input fails the workflow without retries or delivery."""

    def test_unknown_play_type(self):
        catalog = Catalog(plays={"henry-v": Play(name="Henry V", type="history")})
        invoice = Invoice(customer="BigCo", performances=(Performance(play_id="henry-v", audience=10),))

        with pytest.raises(WorkflowFailureError) as exc_info:
            run_statement(make_request(catalog, invoice))

        cause = exc_info.value.cause
        assert isinstance(cause, ApplicationError)
        assert cause.type == "UnknownPlayTypeError"
        assert cause.non_retryable
        assert "unknown type: history" in cause.message
        assert delivered == []

    def test_unknown_play_id(self, catalog):
        invoice = Invoice(customer="BigCo", performances=(Performance(play_id="lear", audience=10),))

        with pytest.raises(WorkflowFailureError) as exc_info:
            run_statement(make_request(catalog, invoice))

        cause = exc_info.value.cause
        assert isinstance(cause, ApplicationError)
        assert cause.type == "PlayNotFoundError"
        assert cause.non_retryable
        assert "lear" in cause.message
        assert delivered == []
