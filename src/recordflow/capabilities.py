"""Capability contracts consumed by the pipeline.

A capability is a named operation with no assumption about how it is
performed. Production adapters live in `recordflow.sources` and
`recordflow.sinks`; recording doubles live in `recordflow.testing`.
Implementations are chosen by passing them in, never looked up.
"""

from __future__ import annotations

from typing import Protocol

from .record import Record


class DataSource(Protocol):
    """Something that can produce a Record."""

    def fetch(self) -> Record:
        """Return a freshly acquired record.

        Raises:
            AcquisitionError: On transport, decode or schema failure.
        """
        ...


class DataSink(Protocol):
    """Something that can consume a Record."""

    def emit(self, record: Record) -> None:
        """Write the record to the sink's destination.

        Raises:
            EmissionError: If the destination cannot be written.
        """
        ...
