"""Standard output sink adapter."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..errors import EmissionError
from ..record import Record

logger = logging.getLogger(__name__)


class StdoutSink:
    """Write a record as two lines: `name=<name>` then `age=<age>`."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize the sink.

        Args:
            stream: Destination stream. Defaults to whatever `sys.stdout` is
                at emit time.
        """
        self._stream = stream

    def emit(self, record: Record) -> None:
        """Write the record and flush.

        Lines written before a failure are left in place.

        Raises:
            EmissionError: If the stream cannot be written or flushed.

        Logs:
            - ERROR: the failure message before raising.
        """
        stream = self._stream if self._stream is not None else sys.stdout
        try:
            for line in record.to_lines():
                stream.write(line + "\n")
            stream.flush()
        except (OSError, ValueError) as exc:
            logger.error("Failed to write record to output stream: %s", exc)
            raise EmissionError(f"Failed to write record: {exc}") from exc
