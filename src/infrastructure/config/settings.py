from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DATABASE_URL_ENV = "TODO_DATABASE_URL"
_DEV_STORAGE_SECRET = "todo-dev-secret"


class ConfigurationError(RuntimeError):
    """Required configuration is missing or invalid. Fatal at startup."""


def _is_debug(env: Mapping[str, str]) -> bool:
    return env.get("TODO_DEBUG") == "1"


def _parse_port(raw: str | None) -> int:
    if not raw:
        return 8000
    try:
        port = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"TODO_PORT must be an integer, got {raw!r}") from exc
    if not 0 < port < 65536:
        raise ConfigurationError(f"TODO_PORT out of range: {port}")
    return port


@dataclass(frozen=True)
class Settings:
    database_url: str
    storage_secret: str
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_dir: Path = Path("./data/logs")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        database_url = (env.get(DATABASE_URL_ENV) or "").strip()
        if not database_url:
            raise ConfigurationError(
                f"{DATABASE_URL_ENV} must be set (e.g. in .env) before the app can start"
            )

        debug = _is_debug(env)
        storage_secret = (env.get("TODO_STORAGE_SECRET") or "").strip()
        if not storage_secret:
            if not debug:
                raise ConfigurationError("TODO_STORAGE_SECRET must be set unless TODO_DEBUG=1")
            storage_secret = _DEV_STORAGE_SECRET

        return cls(
            database_url=database_url,
            storage_secret=storage_secret,
            host=(env.get("TODO_HOST") or "0.0.0.0").strip(),
            port=_parse_port(env.get("TODO_PORT")),
            debug=debug,
            log_dir=Path(env.get("TODO_LOG_DIR") or "./data/logs"),
        )
