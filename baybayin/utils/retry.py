"""Retry with exponential backoff for remote calls."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar


T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass
class RetryConfig:
    """Configuration for retry logic."""

    max_retries: int = 2
    backoff_start: float = 1.0
    backoff_max: float = 10.0
    retryable_exceptions: tuple[type[Exception], ...] = (Exception,)

    def should_retry(self, attempt: int, exception: Exception) -> bool:
        """
        Check if should retry after exception.

        Args:
            attempt: Current attempt number (0-indexed)
            exception: Exception that occurred

        Returns:
            True if should retry
        """
        if attempt >= self.max_retries:
            return False

        return isinstance(exception, self.retryable_exceptions)

    def get_backoff(self, attempt: int) -> float:
        """
        Get backoff time for attempt.

        Args:
            attempt: Attempt number (0-indexed)

        Returns:
            Backoff time in seconds
        """
        backoff = self.backoff_start * (2**attempt)
        return float(min(backoff, self.backoff_max))


async def with_retry(
    func: Callable[..., Awaitable[T]],
    retry_config: RetryConfig,
    *args: Any,
    **kwargs: Any,
) -> T:
    """
    Execute async function with retry logic.

    Cancellation is never retried: CancelledError is not an Exception
    subclass and propagates out of the backoff sleep as well.

    Args:
        func: Async function to execute
        retry_config: Retry configuration
        *args: Function args
        **kwargs: Function kwargs

    Returns:
        Function result

    Raises:
        The last exception once retries are exhausted
    """
    attempt = 0
    while True:
        try:
            return await func(*args, **kwargs)
        except Exception as e:
            if not retry_config.should_retry(attempt, e):
                raise

            backoff = retry_config.get_backoff(attempt)
            logger.warning(f"Attempt {attempt + 1} failed ({e}), retrying in {backoff:.1f}s")
            await asyncio.sleep(backoff)
            attempt += 1
