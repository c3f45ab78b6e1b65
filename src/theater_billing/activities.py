"""
Temporal activities: thin wrappers delegating to the service layer.

Activities are where side-effects happen. The statement itself is computed
inside the workflow (it is deterministic); only delivery touches the
filesystem, so only delivery is an activity. If it raises, Temporal retries it
according to the RetryPolicy configured in the workflow.
"""

import logging

# `activity` provides the @activity.defn decorator that registers a function
# as a Temporal activity. The function name becomes the activity type name
# on the Temporal server (e.g. "deliver_statement").
from temporalio import activity

from theater_billing.domain.models import StatementDelivery
from theater_billing.services.factory import ServiceFactory

logger = logging.getLogger(__name__)


@activity.defn
async def deliver_statement(input: StatementDelivery) -> str:
    """Deliver a rendered statement and return where it was written."""
    logger.info("Activity deliver_statement started for statement %s", input.statement_id)
    result = await ServiceFactory.get_delivery_service().deliver(input)
    logger.info("Activity deliver_statement completed for statement %s", input.statement_id)
    return result
