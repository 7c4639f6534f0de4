import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import dotenv_values, find_dotenv

DEFAULT_TTL = 86400


def _get_int(env: Mapping[str, str | None], name: str, default: int) -> int:
    try:
        return int(env.get(name, default))
    except (TypeError, ValueError):
        return default


def _get_bool(env: Mapping[str, str | None], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off", ""}


@dataclass
class Settings:
    default_ttl: int = DEFAULT_TTL
    metrics_enabled: bool = True


def get_settings() -> Settings:
    """Read settings from a ``.env`` in the working directory and the environment.

    The process environment wins over the file and is never modified.
    """
    path = find_dotenv(usecwd=True)
    env = {**(dotenv_values(path) if path else {}), **os.environ}
    return Settings(
        default_ttl=_get_int(env, "MOCKCACHE_DEFAULT_TTL", DEFAULT_TTL),
        metrics_enabled=_get_bool(env, "MOCKCACHE_METRICS", True),
    )
