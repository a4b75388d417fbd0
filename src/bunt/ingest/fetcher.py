import json
import logging
from typing import Any

import httpx

from bunt.domain.errors import ExtractionError
from bunt.ingest._retry import RetryPolicy

logger = logging.getLogger(__name__)


class ResilientFetcher:
    """GET requests that block and retry until the upstream answers.

    Transport failures and server-side statuses are retried according to the
    injected :class:`RetryPolicy`. A client error status, or a body that
    arrives but cannot be decoded, raises :class:`ExtractionError` straight away.
    """

    def __init__(self, client: httpx.Client | None = None, retry_policy: RetryPolicy | None = None) -> None:
        self._client = client or httpx.Client(timeout=httpx.Timeout(10.0, connect=5.0), follow_redirects=True)
        self._retry_policy = retry_policy or RetryPolicy()

    def _get(self, url: str, params: dict[str, Any] | None) -> httpx.Response:
        try:
            for attempt in self._retry_policy.retrying(url):
                with attempt:
                    response = self._client.get(url, params=params)
                    response.raise_for_status()
        except httpx.HTTPStatusError as e:
            if e.response.is_client_error:
                raise ExtractionError(f"{url} responded {e.response.status_code}") from e
            raise
        logger.debug("GET %s responded %d", url, response.status_code)
        return response

    def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        response = self._get(url, params)
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ExtractionError(f"Could not decode JSON from {url}: {e}") from e

    def get_text(self, url: str, params: dict[str, Any] | None = None) -> str:
        return self._get(url, params).text

    def close(self) -> None:
        self._client.close()
