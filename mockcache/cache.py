"""Virtual-time cache for tests.

Don't use in production. Time only moves when ``advance_time`` is called,
so expiry can be exercised without sleeping.
"""

import copy
import logging
from collections.abc import Iterable
from datetime import timedelta
from typing import Any

from .errors import InvalidArgument, InvalidTTL
from .interface import CacheInterface, Ttl
from .keys import item_list, key_list, validate_key
from .metrics import CACHE_DELETES, CACHE_HITS, CACHE_MISSES, CACHE_WRITES, CLOCK_ADVANCED
from .settings import DEFAULT_TTL, get_settings

logger = logging.getLogger(__name__)


class CacheEntry:
    def __init__(self, value: Any, expires_at: int):
        self.value = value
        self.expires_at = expires_at


class MockCache(CacheInterface):
    DEFAULT_TTL = DEFAULT_TTL

    def __init__(self, default_ttl: int = DEFAULT_TTL, metrics: bool = True):
        self.store: dict[str, CacheEntry] = {}
        self._time = 0
        self._default_ttl = default_ttl
        self._metrics = metrics

    @classmethod
    def from_settings(cls) -> "MockCache":
        settings = get_settings()
        return cls(settings.default_ttl, settings.metrics_enabled)

    @property
    def now(self) -> int:
        return self._time

    @property
    def default_ttl(self) -> int:
        return self._default_ttl

    def advance_time(self, seconds: int) -> None:
        """Move the virtual clock by a whole number of seconds, backwards if negative."""
        if isinstance(seconds, bool) or not isinstance(seconds, int):
            raise InvalidArgument(f"seconds must be an int, got {type(seconds).__name__}")
        self._time += seconds
        if self._metrics and seconds > 0:
            CLOCK_ADVANCED.inc(seconds)
        logger.debug("virtual clock advanced by %s to %s", seconds, self._time)

    def get(self, key: str, default: Any = None) -> Any:
        return self._read(validate_key(key), default)

    def set(self, key: str, value: Any, ttl: Ttl = None) -> bool:
        validate_key(key)
        self._write(key, value, self._expires_at(ttl))
        return True

    def delete(self, key: str) -> bool:
        existed = self.store.pop(validate_key(key), None) is not None
        if existed and self._metrics:
            CACHE_DELETES.inc()
        return existed

    def clear(self) -> bool:
        logger.debug("clearing %d entries", len(self.store))
        self.store.clear()
        return True

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        return {key: self._read(key, default) for key in key_list(keys)}

    def set_multiple(self, values: Any, ttl: Ttl = None) -> bool:
        pairs = item_list(values)
        expires_at = self._expires_at(ttl)
        for key, value in pairs:
            self._write(key, value, expires_at)
        return True

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        for key in key_list(keys):
            self.delete(key)
        return True

    def has(self, key: str) -> bool:
        return self._live(validate_key(key)) is not None

    def _live(self, key: str) -> CacheEntry | None:
        entry = self.store.get(key)
        if entry is None or self._time >= entry.expires_at:
            return None
        return entry

    def _read(self, key: str, default: Any) -> Any:
        entry = self._live(key)
        if entry is None:
            if self._metrics:
                CACHE_MISSES.inc()
            return default
        if self._metrics:
            CACHE_HITS.inc()
        return copy.deepcopy(entry.value)

    def _write(self, key: str, value: Any, expires_at: int) -> None:
        self.store[key] = CacheEntry(copy.deepcopy(value), expires_at)
        if self._metrics:
            CACHE_WRITES.inc()

    def _expires_at(self, ttl: Ttl) -> int:
        # bool is an int subclass but never a meaningful TTL
        if isinstance(ttl, bool):
            raise InvalidTTL(f"invalid TTL: {ttl!r}")
        if isinstance(ttl, int):
            return self._time + ttl
        if isinstance(ttl, timedelta):
            return self._time + ttl // timedelta(seconds=1)
        if ttl is None:
            return self._time + self._default_ttl
        raise InvalidTTL(f"invalid TTL: {ttl!r}")
