"""读缓存

按工作表名缓存整表读取结果，固定有效期，写操作后显式失效。
"""

import logging
import threading
import time
from typing import Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


class ReadCache:
    def __init__(self, ttl_seconds: float = 5.0, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[float, List[dict]]] = {}
        self._lock = threading.Lock()

    def get(self, sheet: str) -> Optional[List[dict]]:
        with self._lock:
            entry = self._entries.get(sheet)
            if entry is None:
                return None
            stored_at, rows = entry
            if self._clock() - stored_at >= self.ttl_seconds:
                del self._entries[sheet]
                logger.debug("cache expired for %s", sheet)
                return None
            logger.debug("cache hit for %s", sheet)
            return rows

    def put(self, sheet: str, rows: List[dict]) -> None:
        with self._lock:
            self._entries[sheet] = (self._clock(), rows)

    def invalidate(self, sheet: str) -> None:
        with self._lock:
            self._entries.pop(sheet, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
