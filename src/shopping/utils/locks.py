"""Per-user serialization of cart operations.

Every cart operation reads a cart (and sometimes a user), decides, then
writes. Two requests for the same user interleaving between the read and the
write could both append the same product or both spend the same balance.
``UserLocks`` hands out one re-entrant lock per email so those sequences run
one at a time per user, while different users never wait on each other.

The locks live in process memory. Workers in separate processes do not see
each other's locks. A lock is dropped once nobody holds or waits on it, so
the registry only carries users with an operation in flight.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

logger = structlog.get_logger(__name__)


class UserLocks:
    def __init__(self) -> None:
        self._guard = threading.Lock()
        # email -> [lock, number of callers holding or waiting on it]
        self._locks: dict[str, list] = {}

    def _borrow(self, email: str) -> threading.RLock:
        with self._guard:
            entry = self._locks.get(email)
            if entry is None:
                entry = [threading.RLock(), 0]
                self._locks[email] = entry
            entry[1] += 1
            return entry[0]

    def _give_back(self, email: str) -> None:
        with self._guard:
            entry = self._locks[email]
            entry[1] -= 1
            if entry[1] == 0:
                del self._locks[email]

    @contextmanager
    def hold(self, email: str) -> Iterator[None]:
        """Block until no other operation for ``email`` is running."""
        lock = self._borrow(email)
        try:
            if not lock.acquire(blocking=False):
                logger.debug("Waiting for cart lock", email=email)
                lock.acquire()
            try:
                yield
            finally:
                lock.release()
        finally:
            self._give_back(email)

    def __len__(self) -> int:
        return len(self._locks)
