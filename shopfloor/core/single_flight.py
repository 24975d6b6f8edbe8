"""单飞保护

同一个 key 同时只允许一个调用执行，并发的第二个调用直接失败，
用于防止同一报价被重复审批（例如双击）。
"""

import threading
from contextlib import contextmanager
from typing import Set

from ..errors import OperationInProgress


class SingleFlight:
    def __init__(self):
        self._lock = threading.Lock()
        self._active: Set[str] = set()

    @contextmanager
    def claim(self, key: str):
        with self._lock:
            if key in self._active:
                raise OperationInProgress(f"Operation already running for {key}")
            self._active.add(key)
        try:
            yield
        finally:
            with self._lock:
                self._active.discard(key)


# 进程内共享，按 proposal_id 加锁
approval_guard = SingleFlight()
