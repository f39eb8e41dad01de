"""Guarded Lock — mutual exclusion with acquisition timeout and poisoning.

Invariants:
    - One GuardedLock per store, held only for that store's own read or mutation
    - Acquisition that does not complete within `timeout` raises the store's failure error
    - An unexpected exception raised while held poisons the lock; later acquisitions
      raise the store's failure error until clear_poison() is called
    - RestaurantError raised while held does not poison (it is an expected outcome)

Design Decisions:
    - threading.Lock, not asyncio.Lock: stores are called from FastAPI's threadpool
    - The failure error is injected (on_failure) so each store maps lock trouble to
      its own error kind (MenusRetrieveError, TablesRetrieveError, LockFailureError)
"""

import logging
import threading
from contextlib import contextmanager
from typing import Callable, Iterator

from restaurant_api.core.errors import RestaurantError

logger = logging.getLogger(__name__)


class GuardedLock:
    """threading.Lock wrapper that surfaces lock trouble as a typed error."""

    def __init__(
        self,
        name: str,
        on_failure: Callable[[str], RestaurantError],
        timeout: float = 5.0,
    ):
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self.name = name
        self.timeout = timeout
        self._on_failure = on_failure
        self._lock = threading.Lock()
        self._poisoned = False  # guarded by _lock

    @property
    def is_poisoned(self) -> bool:
        return self._poisoned

    def clear_poison(self) -> None:
        """Make the lock usable again after a crash while held."""
        with self._lock:
            if self._poisoned:
                logger.warning(f"Clearing poisoned {self.name} lock")
            self._poisoned = False

    @contextmanager
    def hold(self) -> Iterator[None]:
        """Hold the lock for the duration of the with-block."""
        if not self._lock.acquire(timeout=self.timeout):
            logger.error(
                f"{self.name} lock not acquired within {self.timeout}s",
            )
            raise self._on_failure(
                f"{self.name} lock not acquired within {self.timeout}s",
            )
        try:
            if self._poisoned:
                raise self._on_failure(f"{self.name} lock is poisoned")
            try:
                yield
            except RestaurantError:
                raise
            except Exception:
                self._poisoned = True
                logger.error(
                    f"{self.name} lock poisoned by unexpected error",
                    exc_info=True,
                )
                raise
        finally:
            self._lock.release()
