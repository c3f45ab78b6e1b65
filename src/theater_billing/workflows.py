"""
Temporal workflow: StatementWorkflow.

Prices an invoice against the catalog it was started with, then delivers the
rendered statement through an activity. The Temporal server persists state
at every `await`, so a worker crash resumes from the last checkpoint.

Key constraints inside a workflow:
  - Must be **deterministic**: no I/O, no randomness, no system clock.
    The statement engine satisfies this; delivery is an activity.
  - Use `workflow.logger` instead of the stdlib `logging` module.
"""

from datetime import timedelta

from temporalio import workflow
from temporalio.common import RetryPolicy
from temporalio.exceptions import ApplicationError

# Temporal runs workflows inside a sandbox that intercepts imports to enforce
# determinism. Pydantic and our own modules are only used for data modelling
# and deterministic computation, so they are passed through.
with workflow.unsafe.imports_passed_through():
    from theater_billing.activities import deliver_statement
    from theater_billing.domain.errors import BillingError
    from theater_billing.domain.models import StatementDelivery, StatementRequest, StatementResult
    from theater_billing.domain.pricing import PricingStrategy, StandardPricingStrategy
    from theater_billing.domain.statement import StatementEngine


@workflow.defn
class StatementWorkflow:
    """Computes and delivers one invoice statement.

    Execution flow:
        1. Price the invoice (deterministic, in-workflow)
        2. deliver_statement activity → StatementDeliveryService

    A missing play or an unknown play type fails the workflow with a
    non-retryable ApplicationError: retrying can not fix bad input data.

    Supports **Query** `get_status` to inspect progress without affecting
    execution.
    """

    def __init__(self) -> None:
        # Strategy pattern: swap in a different pricing strategy if needed.
        self.pricing: PricingStrategy = StandardPricingStrategy()
        self.request: StatementRequest | None = None
        self.total_amount_cents: int | None = None
        self.total_volume_credits: int | None = None
        self.delivered_to: str | None = None

    @workflow.query
    def get_status(self) -> dict:
        return {
            "statement_id": self.request.statement_id if self.request else None,
            "customer": self.request.invoice.customer if self.request else None,
            "priced": self.total_amount_cents is not None,
            "total_amount_cents": self.total_amount_cents,
            "total_volume_credits": self.total_volume_credits,
            "delivered_to": self.delivered_to,
        }

    @workflow.run
    async def run(self, req: StatementRequest) -> StatementResult:
        self.request = req
        engine = StatementEngine(req.catalog, self.pricing)

        try:
            data = engine.compute(req.invoice)
        except BillingError as err:
            workflow.logger.error("Statement %s rejected: %s", req.statement_id, err)
            raise ApplicationError(str(err), type=type(err).__name__, non_retryable=True) from err

        self.total_amount_cents = data.total_amount_cents
        self.total_volume_credits = data.total_volume_credits
        text = engine.render(data)
        workflow.logger.info(
            "Statement %s for %s: %d cents, %d credits",
            req.statement_id,
            data.customer,
            data.total_amount_cents,
            data.total_volume_credits,
        )

        # Delivery retries up to 5 times with exponential backoff: 1s, 2s, 4s, ...
        retry_policy = RetryPolicy(
            maximum_attempts=5,
            initial_interval=timedelta(seconds=1),
            backoff_coefficient=2.0,
        )
        self.delivered_to = await workflow.execute_activity(
            deliver_statement,
            StatementDelivery(
                statement_id=req.statement_id,
                customer=data.customer,
                text=text,
                output_dir=req.output_dir,
            ),
            start_to_close_timeout=timedelta(seconds=10),
            retry_policy=retry_policy,
        )

        workflow.logger.info("Statement %s delivered to %s", req.statement_id, self.delivered_to)
        return StatementResult(
            statement_id=req.statement_id,
            customer=data.customer,
            total_amount_cents=data.total_amount_cents,
            total_volume_credits=data.total_volume_credits,
            text=text,
            delivered_to=self.delivered_to,
        )
