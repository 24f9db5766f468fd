from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_LOADED = False


def _candidates() -> list[Path]:
    src_dir = Path(__file__).resolve().parents[2]
    # Project root .env wins over src/.env; the working directory is checked last.
    return [
        src_dir.parent / ".env",
        src_dir / ".env",
        Path.cwd() / ".env",
    ]


def load_env() -> None:
    global _LOADED
    if _LOADED:
        return
    _LOADED = True

    loaded_path: Path | None = None
    seen: set[Path] = set()
    for path in _candidates():
        if path in seen or not path.exists():
            continue
        seen.add(path)
        loaded_path = path
        # Real environment variables (Docker/K8s) always win over .env values.
        load_dotenv(dotenv_path=path, override=False)

    if os.getenv("TODO_DEBUG") == "1" and loaded_path is not None:
        logger.debug("Environment loaded from %s", loaded_path)
