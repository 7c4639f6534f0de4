from collections.abc import Iterable, Mapping
from typing import Any

from .errors import InvalidArgument, InvalidKey

# Reserved by the simple-cache key contract.
RESERVED_CHARACTERS = frozenset("{}()/\\@:")


def validate_key(key: Any) -> str:
    if not isinstance(key, str):
        raise InvalidKey(f"cache key must be a string, got {type(key).__name__}")
    for char in key:
        if char in RESERVED_CHARACTERS:
            raise InvalidKey(f"invalid character in key: {char}")
    return key


def key_list(keys: Any) -> list[str]:
    """Materialize a batch of keys, validating all of them before use."""
    if isinstance(keys, (str, bytes)) or not isinstance(keys, Iterable):
        raise InvalidArgument(f"keys must be an iterable of strings, got {type(keys).__name__}")
    return [validate_key(key) for key in keys]


def item_list(values: Any) -> list[tuple[str, Any]]:
    """Materialize key/value pairs from a mapping or an iterable of pairs."""
    if isinstance(values, Mapping):
        pairs = list(values.items())
    elif isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise InvalidArgument(
            f"values must be a mapping or an iterable of pairs, got {type(values).__name__}"
        )
    else:
        pairs = []
        for item in values:
            if not isinstance(item, (tuple, list)) or len(item) != 2:
                raise InvalidArgument(f"expected a (key, value) pair, got {item!r}")
            pairs.append((item[0], item[1]))
    return [(validate_key(key), value) for key, value in pairs]
