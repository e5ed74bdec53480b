"""TTL cache used for pre-fetched revenue figures."""
import time


class TTLCache:
    """Key-value cache with per-key TTL. Single-threaded use only."""

    def __init__(self, default_ttl=3600):
        self.default_ttl = default_ttl
        self._store = {}

    def get(self, key):
        """Get value if exists and not expired."""
        entry = self._store.get(key)
        if entry is None:
            return None
        if time.time() > entry["expires"]:
            del self._store[key]
            return None
        return entry["value"]

    def set(self, key, value, ttl=None):
        """Set key with TTL in seconds; falls back to the cache default."""
        self._store[key] = {
            "value": value,
            "expires": time.time() + (self.default_ttl if ttl is None else ttl),
        }

    def update(self, items, ttl=None):
        for key, value in items.items():
            self.set(key, value, ttl)

    def __len__(self):
        return len(self._store)

    def clear(self):
        """Remove all entries."""
        self._store.clear()
