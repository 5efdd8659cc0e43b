import contextlib
from collections import defaultdict
from threading import Lock
from typing import Dict, Iterator


class KeyedLock:
    """One mutex per key, created on demand and dropped when unused.

    Serialises read-modify-write cycles on the same key inside a process
    while leaving different keys independent.
    """

    def __init__(self):
        self._guard = Lock()
        self._locks: Dict[str, Lock] = {}
        self._holders: Dict[str, int] = defaultdict(int)

    @contextlib.contextmanager
    def hold(self, key: str) -> Iterator[None]:
        with self._guard:
            lock = self._locks.setdefault(key, Lock())
            self._holders[key] += 1

        lock.acquire()
        try:
            yield
        finally:
            lock.release()
            with self._guard:
                self._holders[key] -= 1
                if self._holders[key] <= 0:
                    del self._holders[key]
                    del self._locks[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
