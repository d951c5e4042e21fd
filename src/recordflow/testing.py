"""Recording doubles for verifying pipeline call order.

The doubles perform no I/O. Each appends an `Event` to a shared `EventLog`
when invoked, so one pipeline run yields one chronological trace. Doubles
log *before* failing: a failing source still records `READ_CALLED`.
"""

from __future__ import annotations

import time
from collections.abc import Iterator, Sequence
from enum import Enum
from typing import overload

from .errors import AcquisitionError, EmissionError
from .record import Record

CANONICAL_RECORD = Record(name="foo", age=1)


class Event(Enum):
    """An observed capability invocation."""

    READ_CALLED = "read_called"
    WRITE_CALLED = "write_called"


class EventLog:
    """Append-only, ordered trace of events.

    Entries keep the order in which they were appended. There is no way to
    remove or reorder an entry once added.
    """

    def __init__(self) -> None:
        self._entries: list[Event] = []

    def append(self, event: Event) -> None:
        self._entries.append(event)

    @property
    def entries(self) -> tuple[Event, ...]:
        """Snapshot of the trace."""
        return tuple(self._entries)

    def __iter__(self) -> Iterator[Event]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self._entries)

    @overload
    def __getitem__(self, index: int) -> Event: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Event, ...]: ...

    def __getitem__(self, index: int | slice) -> Event | tuple[Event, ...]:
        return self.entries[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EventLog):
            return self.entries == other.entries
        if isinstance(other, (list, tuple)):
            return list(self._entries) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        names = ", ".join(e.name for e in self._entries)
        return f"EventLog([{names}])"


class RecordingSource:
    """Source double that logs READ_CALLED and returns a fixed record."""

    def __init__(
        self,
        log: EventLog,
        *,
        record: Record = CANONICAL_RECORD,
        delay: float = 0.0,
    ) -> None:
        """Initialize the double.

        Args:
            log: Shared trace to append to.
            record: Record returned by every fetch.
            delay: Seconds to sleep after logging, to simulate latency.
        """
        self.log = log
        self.record = record
        self.delay = delay

    def fetch(self) -> Record:
        self.log.append(Event.READ_CALLED)
        if self.delay > 0:
            time.sleep(self.delay)
        return self.record


class RecordingSink:
    """Sink double that logs WRITE_CALLED and ignores the record."""

    def __init__(self, log: EventLog) -> None:
        self.log = log

    def emit(self, record: Record) -> None:
        self.log.append(Event.WRITE_CALLED)


class FailingSource:
    """Source double that logs READ_CALLED, then raises AcquisitionError."""

    def __init__(self, log: EventLog, error: AcquisitionError | None = None) -> None:
        self.log = log
        self.error = error or AcquisitionError("simulated acquisition failure")

    def fetch(self) -> Record:
        self.log.append(Event.READ_CALLED)
        raise self.error


class FailingSink:
    """Sink double that logs WRITE_CALLED, then raises EmissionError."""

    def __init__(self, log: EventLog, error: EmissionError | None = None) -> None:
        self.log = log
        self.error = error or EmissionError("simulated emission failure")

    def emit(self, record: Record) -> None:
        self.log.append(Event.WRITE_CALLED)
        raise self.error


def expected_trace(*, fetch_fails: bool = False) -> Sequence[Event]:
    """Return the trace a single run should leave behind.

    Args:
        fetch_fails: True if the source is expected to raise.

    Returns:
        `[READ_CALLED]` when the fetch fails, otherwise
        `[READ_CALLED, WRITE_CALLED]`.
    """
    if fetch_fails:
        return [Event.READ_CALLED]
    return [Event.READ_CALLED, Event.WRITE_CALLED]
