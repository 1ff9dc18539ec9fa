"""Fixed-delay retry helper built on tenacity."""

import logging
import time
from typing import Callable, TypeVar

from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from flickr_photoset_uploader.config import DEFAULT_RETRY_ATTEMPTS, DEFAULT_RETRY_DELAY

logger = logging.getLogger(__name__)

T = TypeVar("T")


def rescue_retry(
    operation: Callable[[], T],
    attempts: int = DEFAULT_RETRY_ATTEMPTS,
    delay: float = DEFAULT_RETRY_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Call an operation, retrying on any exception with a fixed delay.

    Args:
        operation: Zero-argument callable to invoke
        attempts: Maximum number of attempts, including the first one
        delay: Seconds to sleep between attempts
        sleep: Sleep function, replaceable in tests

    Returns:
        The operation's return value from the first successful attempt

    Raises:
        ValueError: If attempts or delay are out of range
        Exception: The last error raised by the operation once all attempts
            are used up
    """
    if attempts < 1:
        raise ValueError("attempts must be at least 1")
    if delay < 0:
        raise ValueError("delay cannot be negative")

    retrying = Retrying(
        retry=retry_if_exception_type(Exception),
        wait=wait_fixed(delay),
        stop=stop_after_attempt(attempts),
        sleep=sleep,
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    return retrying(operation)
