"""Tests for the stdout sink adapter."""

from __future__ import annotations

import io

import pytest

from recordflow.errors import EmissionError
from recordflow.record import Record
from recordflow.sinks import StdoutSink


class _BrokenStream(io.StringIO):
    """Stream that accepts `fail_after` writes, then raises OSError."""

    def __init__(self, fail_after: int) -> None:
        super().__init__()
        self.fail_after = fail_after

    def write(self, s: str) -> int:
        if self.fail_after <= 0:
            raise OSError("broken pipe")
        self.fail_after -= 1
        return super().write(s)


@pytest.mark.unit
def test_emit_writes_two_lines_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    StdoutSink().emit(Record(name="John Smith", age=20))

    captured = capsys.readouterr()
    assert captured.out == "name=John Smith\nage=20\n"
    assert captured.err == ""


@pytest.mark.unit
def test_emit_writes_to_given_stream() -> None:
    stream = io.StringIO()

    StdoutSink(stream).emit(Record(name="foo", age=1))

    assert stream.getvalue() == "name=foo\nage=1\n"


@pytest.mark.unit
def test_emit_write_failure_raises() -> None:
    with pytest.raises(EmissionError, match="broken pipe") as exc_info:
        StdoutSink(_BrokenStream(fail_after=0)).emit(Record(name="foo", age=1))

    assert isinstance(exc_info.value.__cause__, OSError)


@pytest.mark.unit
def test_emit_keeps_lines_written_before_failure() -> None:
    stream = _BrokenStream(fail_after=1)

    with pytest.raises(EmissionError):
        StdoutSink(stream).emit(Record(name="foo", age=1))

    assert stream.getvalue() == "name=foo\n"


@pytest.mark.unit
def test_emit_to_closed_stream_raises() -> None:
    stream = io.StringIO()
    stream.close()

    with pytest.raises(EmissionError):
        StdoutSink(stream).emit(Record(name="foo", age=1))
