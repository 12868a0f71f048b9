import logging
from collections.abc import Callable
from typing import Any

import httpx
from tenacity import RetryCallState, retry, retry_if_exception, stop_after_attempt, wait_exponential_jitter

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS = frozenset({429})


def is_transient_http_error(error: BaseException) -> bool:
    """True for failures worth another attempt: connection trouble, 429 and 5xx.

    A 404 means the basho or division does not exist and is returned at once.
    """
    if isinstance(error, httpx.TransportError):
        return True
    if isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
        return status >= 500 or status in _RETRYABLE_STATUS
    return False


def default_http_retry(label: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Return a tenacity retry decorator for sumo-api calls.

    *label* names the call in the warning logged before each retry.
    """

    def _log_retry(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning("Retrying %s (attempt %d/3): %s", label, retry_state.attempt_number, error)

    return retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential_jitter(initial=1, max=10),
        retry=retry_if_exception(is_transient_http_error),
        before_sleep=_log_retry,
        reraise=True,
    )
