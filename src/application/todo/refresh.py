from __future__ import annotations

import logging
import threading
from collections import defaultdict
from typing import Callable

logger = logging.getLogger(__name__)

TODOS_PATH = "/dashboard/todos"

RefreshCallback = Callable[[], None]


class ViewRefresher:
    """Tells views showing an owner's data at a path to re-render."""

    def __init__(self) -> None:
        self._subscribers: dict[tuple[str, str], list[RefreshCallback]] = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, path: str, owner_id: str, callback: RefreshCallback) -> Callable[[], None]:
        key = (path, owner_id)
        with self._lock:
            self._subscribers[key].append(callback)

        def unsubscribe() -> None:
            with self._lock:
                callbacks = self._subscribers.get(key)
                if callbacks and callback in callbacks:
                    callbacks.remove(callback)
                if not callbacks:
                    self._subscribers.pop(key, None)

        return unsubscribe

    def subscriber_count(self, path: str, owner_id: str) -> int:
        with self._lock:
            return len(self._subscribers.get((path, owner_id), ()))

    def revalidate(self, path: str, owner_id: str) -> None:
        with self._lock:
            callbacks = list(self._subscribers.get((path, owner_id), ()))
        for callback in callbacks:
            try:
                callback()
            except Exception:
                # The mutation is already committed; a broken view must not undo that.
                logger.exception("view.refresh_failed", extra={"path": path})
