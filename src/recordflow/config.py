"""Validation of user-supplied settings.

Builds on the constants in `recordflow.global_config`. Every check runs
before any capability is constructed, so a bad setting never reaches the
network.
"""

from __future__ import annotations

import math
from urllib.parse import urlsplit

from .errors import ConfigurationError
from .global_config import ALLOWED_URL_SCHEMES, URL_ENV_VAR


def resolve_endpoint(url: str | None) -> str:
    """Validate and normalize the endpoint URL.

    Args:
        url: Raw value from `--url` or the environment. May be None.

    Returns:
        The URL with surrounding whitespace removed.

    Raises:
        ConfigurationError: If the URL is missing, blank, not http(s), or has
            no host.
    """
    if url is None or not url.strip():
        raise ConfigurationError(
            f"An endpoint URL is required (pass --url or set {URL_ENV_VAR})"
        )

    url = url.strip()
    parts = urlsplit(url)
    if parts.scheme.lower() not in ALLOWED_URL_SCHEMES:
        raise ConfigurationError(
            f"Unsupported URL scheme in {url!r}. "
            f"Expected one of: {', '.join(ALLOWED_URL_SCHEMES)}"
        )
    if not parts.netloc:
        raise ConfigurationError(f"URL {url!r} has no host")
    return url


def resolve_timeout(seconds: float) -> float:
    """Validate the request timeout.

    Raises:
        ConfigurationError: If the timeout is not a positive, finite number.
    """
    if not math.isfinite(seconds) or seconds <= 0:
        raise ConfigurationError(
            f"Timeout must be a positive, finite number, got {seconds}"
        )
    return float(seconds)
