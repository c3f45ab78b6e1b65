"""
JSON file loaders for the play catalog and invoices.

Part of the **service layer**: loading happens at the edges (CLI, workflow
starter), never inside the statement workflow, which must stay free of I/O.

File formats:

    plays.json     {"hamlet": {"name": "Hamlet", "type": "tragedy"}, ...}
    invoices.json  [{"customer": "BigCo",
                     "performances": [{"playID": "hamlet", "audience": 55}]}]

A single invoice object (not wrapped in a list) is accepted as well.
Malformed files raise pydantic.ValidationError unchanged.
"""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter

from theater_billing.domain.models import Catalog, Invoice, Play

logger = logging.getLogger(__name__)

_plays_adapter = TypeAdapter(dict[str, Play])
_invoices_adapter = TypeAdapter(list[Invoice])


class PlayRepository:
    """Loads the play catalog from a JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> Catalog:
        plays = _plays_adapter.validate_python(_read_json(self.path))
        logger.info("Loaded %d plays from %s", len(plays), self.path)
        return Catalog(plays=plays)


class InvoiceRepository:
    """Loads invoices from a JSON file, preserving file order."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[Invoice]:
        raw = _read_json(self.path)
        if isinstance(raw, dict):
            raw = [raw]
        invoices = _invoices_adapter.validate_python(raw)
        logger.info("Loaded %d invoices from %s", len(invoices), self.path)
        return invoices


def _read_json(path: Path):
    with path.open(encoding="utf-8") as f:
        return json.load(f)
