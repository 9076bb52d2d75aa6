import threading
import weakref
from contextlib import contextmanager


class OwnerLocks:
    """One re-entrant lock per ledger owner.

    Handlers hold the owner's lock for the whole load-then-mutate (or
    load-then-read) sequence, so requests for the same owner are serialized
    while different owners proceed independently. A lock is dropped once no
    request holds a reference to it.
    """

    def __init__(self):
        self._locks = weakref.WeakValueDictionary()
        self._guard = threading.Lock()

    def __len__(self):
        return len(self._locks)

    def get(self, owner):
        with self._guard:
            lock = self._locks.get(owner)
            if lock is None:
                lock = threading.RLock()
                self._locks[owner] = lock
            return lock

    @contextmanager
    def hold(self, owner):
        lock = self.get(owner)
        with lock:
            yield
