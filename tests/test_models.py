"""Unit tests for domain models and errors.

These test invariants that must hold at construction time.
"""

import pytest
from pydantic import ValidationError

from theater_billing.domain.errors import BillingError, ErrorCode, PlayNotFoundError
from theater_billing.domain.models import Catalog, Invoice, Performance, Play


class TestPerformance:
    def test_accepts_zero_audience(self):
        assert Performance(play_id="hamlet", audience=0).audience == 0

    def test_rejects_negative_audience(self):
        with pytest.raises(ValidationError):
            Performance(play_id="hamlet", audience=-1)

    def test_accepts_play_id_alias(self):
        assert Performance.model_validate({"playID": "hamlet", "audience": 3}).play_id == "hamlet"

    def test_is_immutable(self):
        performance = Performance(play_id="hamlet", audience=3)
        with pytest.raises(ValidationError):
            performance.audience = 4


class TestInvoice:
    def test_defaults_to_no_performances(self):
        assert Invoice(customer="BigCo").performances == ()

    def test_preserves_order(self):
        invoice = Invoice.model_validate(
            {
                "customer": "BigCo",
                "performances": [{"playID": "b", "audience": 1}, {"playID": "a", "audience": 2}],
            }
        )
        assert [p.play_id for p in invoice.performances] == ["b", "a"]


class TestCatalog:
    def test_resolve(self, catalog):
        assert catalog.resolve("hamlet") == Play(name="Hamlet", type="tragedy")

    def test_resolve_missing(self, catalog):
        with pytest.raises(PlayNotFoundError) as exc_info:
            catalog.resolve("lear")
        assert exc_info.value.play_id == "lear"
        assert str(exc_info.value) == "PLAY_NOT_FOUND: unknown play id: lear"

    def test_play_keeps_unknown_type(self):
        assert Play(name="Henry V", type="history").type == "history"


class TestErrors:
    def test_play_not_found_hierarchy(self):
        err = PlayNotFoundError("lear")
        assert isinstance(err, BillingError)
        assert isinstance(err, LookupError)
        assert err.code is ErrorCode.PLAY_NOT_FOUND
