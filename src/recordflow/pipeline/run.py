"""Fetch a record from a source and emit it to a sink."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..capabilities import DataSink, DataSource

logger = logging.getLogger(__name__)


def run(source: DataSource, sink: DataSink) -> None:
    """Run one fetch -> emit pass.

    The sink is only reached after `source.fetch()` has returned. Errors from
    either step propagate unchanged; nothing is retried.

    Args:
        source: Capability that acquires the record.
        sink: Capability that emits the record.

    Raises:
        AcquisitionError: If the fetch fails. The sink is never called.
        EmissionError: If the emit fails.

    Logs:
        - DEBUG: before each step and when the run completes.
    """
    logger.debug("Fetching record from %s", type(source).__name__)
    record = source.fetch()

    logger.debug("Emitting record to %s", type(sink).__name__)
    sink.emit(record)

    logger.debug("Run complete")


@dataclass(frozen=True)
class Orchestrator:
    """A source and sink pair chosen at construction time."""

    source: DataSource
    sink: DataSink

    def run(self) -> None:
        """Run one fetch -> emit pass over the configured capabilities."""
        run(self.source, self.sink)
