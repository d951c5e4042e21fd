"""Production data sources.

- `sources/http.py` - fetch a record as JSON over HTTP GET
"""

from .http import HttpSource

__all__ = ["HttpSource"]
