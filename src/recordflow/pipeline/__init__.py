"""Pipeline orchestration layer.

`pipeline/run.py` sequences a single fetch -> emit pass over injected
capabilities.

Import policy:
- CLI imports from `pipeline.*` for orchestration.
- `pipeline.*` depends only on `capabilities`, `record` and `errors`.
- `sources.*` and `sinks.*` must not call `pipeline.*`.
"""

from .run import Orchestrator, run

__all__ = ["Orchestrator", "run"]
