"""Waiting for side effects on the platform to become observable.

Operations such as creating a service or deleting a row complete
asynchronously; callers poll a predicate until it holds or a deadline passes.
"""

import logging
import time
from collections.abc import Callable

from ..config import get_settings
from ..exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def wait_until(
    condition: Callable[[], bool],
    timeout: float,
    poll_interval: float | None = None,
    *,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """Wait until a condition becomes true.

    The condition is checked at least once, even with a zero timeout.

    Args:
        condition: Function that returns True when the side effect is observed
        timeout: Maximum time to wait in seconds
        poll_interval: Delay between checks, defaults to the configured poll interval
        clock: Monotonic clock, replaceable in tests
        sleep: Sleep function, replaceable in tests

    Returns:
        True if the condition held within the deadline, False otherwise

    Example:
        created = wait_until(lambda: directory.find_service(7, 42) is not None, timeout=10)
    """
    if condition is None:
        raise InvalidArgumentError("condition", "must not be None")
    if timeout < 0:
        raise InvalidArgumentError("timeout", "needs to be zero or a positive number")
    if poll_interval is None:
        poll_interval = get_settings().poll_interval

    deadline = clock() + timeout
    while True:
        if condition():
            return True
        remaining = deadline - clock()
        if remaining <= 0:
            logger.debug(f"Condition not met within {timeout}s")
            return False
        sleep(min(poll_interval, remaining))


def retry_until_success(
    task: Callable[[], bool],
    retries: int | None = None,
    sleep_time: float | None = None,
    *,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """Run a task until it succeeds or the maximum number of attempts is reached.

    Args:
        task: Function returning True on success
        retries: Maximum number of attempts, defaults to the configured retry count
        sleep_time: Delay between attempts, defaults to the configured poll interval
        sleep: Sleep function, replaceable in tests

    Returns:
        True if the task succeeded, False otherwise
    """
    settings = get_settings()
    retries = settings.retry_count if retries is None else retries
    sleep_time = settings.poll_interval if sleep_time is None else sleep_time

    for attempt in range(1, retries + 1):
        if task():
            return True
        logger.debug(f"Attempt {attempt}/{retries} failed")
        if attempt < retries:
            sleep(sleep_time)

    return False
