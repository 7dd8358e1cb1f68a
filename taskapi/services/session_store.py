"""
Server-side session storage, keyed by the opaque token carried in the cookie
"""

import threading
import time
from abc import ABC, abstractmethod
from typing import Optional


class SessionStore(ABC):
    """What the cookie session needs from a backing store."""

    @abstractmethod
    def get(self, token: str) -> Optional[str]:
        """Return the identity stored under `token`, or None."""

    @abstractmethod
    def set(self, token: str, identity: str) -> None:
        ...

    @abstractmethod
    def destroy(self, token: str) -> None:
        ...


class MemorySessionStore(SessionStore):
    def __init__(self, ttl: Optional[float] = None):
        self.ttl = ttl
        self._entries = {}
        self._lock = threading.Lock()

    def get(self, token):
        with self._lock:
            entry = self._entries.get(token)
            if entry is None:
                return None
            identity, expires_at = entry
            if expires_at is not None and expires_at <= time.monotonic():
                del self._entries[token]
                return None
            return identity

    def set(self, token, identity):
        expires_at = time.monotonic() + self.ttl if self.ttl else None
        with self._lock:
            self._entries[token] = (identity, expires_at)

    def destroy(self, token):
        with self._lock:
            self._entries.pop(token, None)

    def __len__(self):
        with self._lock:
            return len(self._entries)
