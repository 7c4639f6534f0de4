from collections.abc import Iterable
from datetime import timedelta
from typing import Any

Ttl = int | timedelta | None


class CacheInterface:
    """Simple key/value cache contract: single and batch reads, writes and deletes."""

    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any, ttl: Ttl = None) -> bool:
        raise NotImplementedError

    def delete(self, key: str) -> bool:
        raise NotImplementedError

    def clear(self) -> bool:
        raise NotImplementedError

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        raise NotImplementedError

    def set_multiple(self, values: Any, ttl: Ttl = None) -> bool:
        raise NotImplementedError

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        raise NotImplementedError

    def has(self, key: str) -> bool:
        raise NotImplementedError
