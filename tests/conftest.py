"""Pytest configuration and shared fixtures."""

import pytest

from theater_billing.domain.models import Catalog, Invoice, Performance, Play
from theater_billing.services.factory import ServiceFactory


@pytest.fixture
def catalog() -> Catalog:
    return Catalog(
        plays={
            "hamlet": Play(name="Hamlet", type="tragedy"),
            "as-like": Play(name="As You Like It", type="comedy"),
            "othello": Play(name="Othello", type="tragedy"),
        }
    )


@pytest.fixture
def big_co_invoice() -> Invoice:
    return Invoice(
        customer="BigCo",
        performances=(
            Performance(play_id="hamlet", audience=55),
            Performance(play_id="as-like", audience=35),
            Performance(play_id="othello", audience=40),
        ),
    )


@pytest.fixture(autouse=True)
def reset_services():
    ServiceFactory.reset()
    yield
    ServiceFactory.reset()
