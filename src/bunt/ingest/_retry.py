import logging
from dataclasses import dataclass

import httpx
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    stop_never,
    wait_fixed,
)

logger = logging.getLogger(__name__)

DEFAULT_RETRY_INTERVAL = 1.5


def is_retryable(error: BaseException) -> bool:
    """Transport failures and server-side statuses may clear up; other 4xx answers never will."""
    if isinstance(error, httpx.TransportError):
        return True
    if isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
        return error.response.is_server_error or status == httpx.codes.TOO_MANY_REQUESTS
    return False


@dataclass(frozen=True)
class RetryPolicy:
    """How long to wait between failed requests and how many times to try.

    The default never gives up: a flaky upstream only ever delays a reply.
    """

    interval: float = DEFAULT_RETRY_INTERVAL
    max_attempts: int | None = None

    def retrying(self, label: str) -> Retrying:
        """Return a tenacity controller for one request.

        *label* is interpolated into the warning emitted before each retry,
        e.g. ``"Retrying <label> (attempt 2): <error>"``.
        """

        def _log_retry(retry_state: RetryCallState) -> None:
            logger.warning("Retrying %s (attempt %d): %s", label, retry_state.attempt_number, retry_state.outcome)

        return Retrying(
            stop=stop_never if self.max_attempts is None else stop_after_attempt(self.max_attempts),
            wait=wait_fixed(self.interval),
            retry=retry_if_exception(is_retryable),
            before_sleep=_log_retry,
            reraise=True,
        )
