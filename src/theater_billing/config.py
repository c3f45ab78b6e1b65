"""
Runtime settings shared by the worker, the client and the CLI.

Values come from environment variables, falling back to defaults that work
against a local Temporal dev server (`temporal server start-dev`).
"""

import logging
import os

from pydantic import BaseModel, ConfigDict


class Settings(BaseModel):
    """Connection and output settings."""

    model_config = ConfigDict(frozen=True)

    temporal_address: str = "localhost:7233"
    # Task queue name: a logical queue that connects clients to workers.
    # The client specifies it when starting a workflow and the worker when
    # polling. They must match for work to be routed.
    task_queue: str = "theater-statements"
    output_dir: str = "statements"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        defaults = cls()
        return cls(
            temporal_address=os.getenv("TEMPORAL_ADDRESS", defaults.temporal_address),
            task_queue=os.getenv("THEATER_TASK_QUEUE", defaults.task_queue),
            output_dir=os.getenv("THEATER_OUTPUT_DIR", defaults.output_dir),
            log_level=os.getenv("THEATER_LOG_LEVEL", defaults.log_level).upper(),
        )


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
