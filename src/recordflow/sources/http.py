"""HTTP source adapter: GET a JSON object and decode it into a Record."""

from __future__ import annotations

import logging

import httpx

from ..errors import AcquisitionError, from_http_error
from ..global_config import DEFAULT_TIMEOUT_S, USER_AGENT
from ..record import Record

logger = logging.getLogger(__name__)


class HttpSource:
    """Fetch a record from a JSON endpoint."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_S,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the source.

        No I/O happens here; the request is issued by `fetch()`.

        Args:
            url: Endpoint to GET.
            timeout: Request timeout in seconds.
            client: Optional preconfigured client. It is used as-is and left
                open. When omitted, a client is created per fetch.
        """
        self.url = url
        self.timeout = timeout
        self._client = client

    def fetch(self) -> Record:
        """GET the endpoint and decode the response body.

        Returns:
            Record decoded from the JSON body.

        Raises:
            AcquisitionError: On transport failure, non-2xx status, invalid
                JSON, or a payload that does not match Record.

        Logs:
            - INFO: "GET {url}" before the request.
            - ERROR: the failure message before raising.
        """
        logger.info("GET %s", self.url)
        try:
            response = self._get()
            response.raise_for_status()
        except httpx.HTTPError as exc:
            error = from_http_error(exc, self.url)
            logger.error("%s", error)
            raise error from exc

        try:
            payload = response.json()
        except (ValueError, RecursionError) as exc:
            logger.error("Response from %s is not valid JSON: %s", self.url, exc)
            raise AcquisitionError(
                f"Response from {self.url} is not valid JSON: {exc}"
            ) from exc

        try:
            return Record.from_payload(payload)
        except AcquisitionError as exc:
            logger.error("Unexpected payload from %s: %s", self.url, exc)
            raise

    def _get(self) -> httpx.Response:
        headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
        if self._client is not None:
            return self._client.get(
                self.url, headers=headers, timeout=self.timeout, follow_redirects=True
            )
        with httpx.Client() as client:
            return client.get(
                self.url, headers=headers, timeout=self.timeout, follow_redirects=True
            )
