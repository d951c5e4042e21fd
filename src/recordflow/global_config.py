"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only simple,
shared cross-cutting constants that many modules can import.
Validation of user-supplied values lives in `recordflow.config`.
"""

# Core Names
PROJECT_NAME = "recordflow"

# Environment variable consulted when --url is not given
URL_ENV_VAR = "RECORDFLOW_URL"

# HTTP acquisition
DEFAULT_TIMEOUT_S: float = 10.0
USER_AGENT = f"{PROJECT_NAME}/0.1"
ALLOWED_URL_SCHEMES = ("http", "https")
