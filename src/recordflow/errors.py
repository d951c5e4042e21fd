"""Exception types for the record pipeline."""

from __future__ import annotations

import httpx


class RecordflowError(Exception):
    """Base exception for pipeline errors.

    Attributes:
        exit_code: Process exit code the CLI uses when this error ends a run.
    """

    exit_code: int = 1


class ConfigurationError(RecordflowError):
    """Raised when the endpoint or another setting is missing or invalid."""

    exit_code = 2


class AcquisitionError(RecordflowError):
    """Raised when a record cannot be fetched or decoded."""


class EmissionError(RecordflowError):
    """Raised when a record cannot be written to its destination."""


def from_http_error(error: httpx.HTTPError, url: str) -> AcquisitionError:
    """Map a raw httpx error to a project-level AcquisitionError.

    Status errors keep the response code in the message; timeouts and other
    transport failures are described by their exception type.

    Args:
        error: httpx exception to convert.
        url: Endpoint that was requested.

    Returns:
        AcquisitionError instance with a human-readable message.
    """
    if isinstance(error, httpx.HTTPStatusError):
        code = error.response.status_code
        reason = error.response.reason_phrase
        return AcquisitionError(f"GET {url} returned HTTP {code} {reason}".rstrip())
    if isinstance(error, httpx.TimeoutException):
        return AcquisitionError(f"GET {url} timed out")
    return AcquisitionError(f"GET {url} failed: {type(error).__name__}: {error}")
