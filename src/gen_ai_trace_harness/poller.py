"""
Polling for traces that are exported asynchronously and may not exist yet.
"""

from typing import Callable, Sequence, TypeVar
import logging
import time

from .errors import TracePollTimeoutError

T = TypeVar("T")


class TracePoller:
    """
    Repeatedly invokes a fetch operation until it returns a non-empty batch.

    Fetches are serial and spaced by ``interval`` seconds. Exceptions raised
    by the fetch operation itself are not retried: the poller only covers
    arrival latency of queries that succeeded but found nothing yet.
    """

    def __init__(
        self,
        interval: float,
        timeout: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the TracePoller.

        Args:
            interval: Seconds to wait between fetch attempts
            timeout: Seconds after which polling gives up
            clock: Monotonic clock returning seconds
            sleep: Function used to wait between attempts
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        if timeout < 0:
            raise ValueError(f"timeout must not be negative, got {timeout}")
        self.interval = interval
        self.timeout = timeout
        self._clock = clock
        self._sleep = sleep
        self.logger = logging.getLogger(self.__class__.__name__)

    def await_non_empty(self, fetch: Callable[[], Sequence[T]]) -> Sequence[T]:
        """
        Poll ``fetch`` until it returns a non-empty result.

        Args:
            fetch: Zero-argument operation returning a batch of traces

        Returns:
            The first non-empty batch returned by ``fetch``

        Raises:
            TracePollTimeoutError: If the deadline passes without a non-empty batch
        """
        started = self._clock()
        attempts = 0

        while True:
            attempts += 1
            result = fetch()
            elapsed = self._clock() - started

            if result:
                self.logger.info(f"Fetched {len(result)} trace(s) after {elapsed:.2f}s ({attempts} attempt(s))")
                return result

            remaining = self.timeout - elapsed
            if remaining > 0:
                wait = min(self.interval, remaining)
                self.logger.debug(f"Attempt {attempts} returned no traces after {elapsed:.2f}s; retrying in {wait:.2f}s")
                self._sleep(wait)
                elapsed = self._clock() - started

            # Never waits past the deadline, and no fetch is issued once it is reached.
            if elapsed >= self.timeout:
                self.logger.warning(f"Gave up waiting for traces after {elapsed:.2f}s ({attempts} attempt(s))")
                raise TracePollTimeoutError(elapsed, self.timeout, attempts)


def await_non_empty(fetch: Callable[[], Sequence[T]], interval: float, timeout: float) -> Sequence[T]:
    """Poll ``fetch`` every ``interval`` seconds until non-empty or ``timeout`` elapses."""
    return TracePoller(interval, timeout).await_non_empty(fetch)
