"""行存储

RowStore 是核心唯一依赖的持久化接口：fetch_all / append / update / delete。
"""

from .backends import RowBackend, build_backend
from .cache import ReadCache
from .query import Query
from .row_store import RowStore

__all__ = ["RowBackend", "build_backend", "ReadCache", "Query", "RowStore"]
