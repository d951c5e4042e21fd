"""Production data sinks.

- `sinks/stdout.py` - write a record as `key=value` lines to standard output
"""

from .stdout import StdoutSink

__all__ = ["StdoutSink"]
