"""
Domain models for theater billing.

All models are frozen Pydantic v2 models: they are validated once when built
from external data (JSON files, workflow payloads) and never mutated after.
Temporal transmits workflow/activity inputs and outputs as JSON payloads, and
these models serialize cleanly via the pydantic_data_converter configured on
both the client and the worker.

PlayType inherits from (str, Enum) so it compares equal to the raw type
strings found in the play catalog (e.g. "tragedy").
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from theater_billing.domain.errors import PlayNotFoundError


class PlayType(str, Enum):
    """Play types the pricing rules know about."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"


class Play(BaseModel):
    """Metadata for one play in the catalog.

    `type` stays a plain string: an unknown type is only rejected when the
    play is priced, not when the catalog is loaded.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: str


class Performance(BaseModel):
    """One performance of a play, referenced by catalog key."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    play_id: str = Field(..., alias="playID")
    audience: int = Field(..., ge=0)  # Seats sold


class Invoice(BaseModel):
    """A customer's invoice. Performance order is the printed line order."""

    model_config = ConfigDict(frozen=True)

    customer: str
    performances: tuple[Performance, ...] = ()


class Catalog(BaseModel):
    """Lookup table from play id to Play."""

    model_config = ConfigDict(frozen=True)

    plays: dict[str, Play] = Field(default_factory=dict)

    def resolve(self, play_id: str) -> Play:
        try:
            return self.plays[play_id]
        except KeyError:
            raise PlayNotFoundError(play_id) from None


# ── Statement output ─────────────────────────────────────────────────


class StatementLine(BaseModel):
    """Computed charge and credits for one performance."""

    model_config = ConfigDict(frozen=True)

    play_name: str
    audience: int
    amount_cents: int
    volume_credits: int


class StatementData(BaseModel):
    """Everything a statement renders, in raw integer form."""

    model_config = ConfigDict(frozen=True)

    customer: str
    lines: tuple[StatementLine, ...] = ()
    total_amount_cents: int = 0
    total_volume_credits: int = 0


# ── Workflow input / output ──────────────────────────────────────────


class StatementRequest(BaseModel):
    """Input to StatementWorkflow.

    Carries the catalog along with the invoice so the workflow can price it
    without doing any I/O.
    """

    statement_id: str = Field(..., min_length=1)
    invoice: Invoice
    catalog: Catalog
    output_dir: str = "statements"


class StatementResult(BaseModel):
    """Final result returned by the workflow to the client."""

    statement_id: str
    customer: str
    total_amount_cents: int
    total_volume_credits: int
    text: str
    delivered_to: str | None = None  # Path written by deliver_statement


# ── Activity payload models ──────────────────────────────────────────


class StatementDelivery(BaseModel):
    """Payload for the deliver_statement activity."""

    statement_id: str
    customer: str
    text: str
    output_dir: str = "statements"
