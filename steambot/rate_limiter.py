"""Token-bucket rate limiter shared by every outbound Steam request.

The bucket starts empty: callers wait for the first refill tick before the
first request goes out. A background thread adds one permit per tick while
the bucket is below capacity and drops the tick otherwise, so idle periods
never accumulate more than ``burst`` permits.
"""

from __future__ import annotations

import threading

from steambot._log import get_logger

logger = get_logger("rate_limiter")

_NANOS_PER_SECOND = 1_000_000_000


class RateLimiterClosed(RuntimeError):
    """Raised by :meth:`RateLimiter.acquire` once the limiter has been closed."""


class RateLimiter:
    """Thread-safe blocking token bucket with a periodic refill thread."""

    def __init__(self, requests_per_second: int, burst: int) -> None:
        """
        Args:
            requests_per_second: Permits added per second. Must be > 0.
            burst: Maximum permits held at once. Must be >= 1.
        """
        if requests_per_second <= 0:
            raise ValueError(f"requests_per_second must be > 0, got {requests_per_second}")
        if burst < 1:
            raise ValueError(f"burst must be >= 1, got {burst}")

        self._capacity = burst
        self._refill_interval_ns = _NANOS_PER_SECOND // requests_per_second
        self._available = 0
        self._closed = False
        self._cond = threading.Condition(threading.Lock())
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._run, name="steambot-refill", daemon=True)
        self._thread.start()
        logger.debug(
            "Started limiter: %d req/s, burst %d",
            requests_per_second,
            burst,
        )

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def refill_interval_ns(self) -> int:
        return self._refill_interval_ns

    @property
    def refill_interval(self) -> float:
        """Seconds between refill ticks."""
        return self._refill_interval_ns / _NANOS_PER_SECOND

    @property
    def available(self) -> int:
        with self._cond:
            return self._available

    @property
    def closed(self) -> bool:
        return self._closed

    def acquire(self) -> None:
        """Block until a permit is available, then consume it.

        There is no timeout. Raises :class:`RateLimiterClosed` if the limiter
        is closed before or while waiting.
        """
        with self._cond:
            while self._available == 0:
                if self._closed:
                    raise RateLimiterClosed("rate limiter is closed")
                self._cond.wait()
            if self._closed:
                raise RateLimiterClosed("rate limiter is closed")
            self._available -= 1

    def _try_add(self) -> bool:
        """Add one permit unless the bucket is full. Never blocks on a full bucket."""
        with self._cond:
            if self._closed or self._available >= self._capacity:
                return False
            self._available += 1
            self._cond.notify()
            return True

    def _run(self) -> None:
        interval = self.refill_interval
        while not self._stop_event.wait(interval):
            self._try_add()

    def close(self) -> None:
        """Stop the refill thread and wake every blocked caller (idempotent)."""
        with self._cond:
            if self._closed:
                return
            self._closed = True
            self._cond.notify_all()
        self._stop_event.set()
        if self._thread is not threading.current_thread():
            self._thread.join(timeout=10)
        logger.debug("Stopped limiter")

    def __enter__(self) -> RateLimiter:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
