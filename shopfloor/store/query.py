"""查询兼容层

模仿关系型客户端的链式查询：

    store.table("production_processes") \
        .filter("production_order_id", order_id) \
        .order_by("sequence_order") \
        .all()

立即在整表读取结果上求值，只支持等值过滤、单字段排序和 limit。
等值比较是宽松的（150 == "150"）。排序稳定：键相同的行保持存储顺序。
"""

from typing import Any, List, Optional, Tuple

from ..utils.helpers import loose_equals, sort_key


class Query:
    def __init__(self, store, table: str):
        self.store = store
        self.table_name = table
        self._filters: List[Tuple[str, Any]] = []
        self._order: Optional[Tuple[str, bool]] = None
        self._limit: Optional[int] = None

    def filter(self, field: str, value: Any) -> "Query":
        self._filters.append((field, value))
        return self

    def order_by(self, field: str, descending: bool = False) -> "Query":
        self._order = (field, descending)
        return self

    def limit(self, n: int) -> "Query":
        self._limit = n
        return self

    def all(self) -> List[dict]:
        rows = self.store.fetch_all(self.table_name)
        for field, value in self._filters:
            rows = [row for row in rows if loose_equals(row.get(field), value)]
        if self._order is not None:
            field, descending = self._order
            # sorted() 在 reverse=True 时同样保持相等元素的原有顺序
            rows = sorted(rows, key=lambda row: sort_key(row.get(field)), reverse=descending)
        if self._limit is not None:
            rows = rows[:self._limit]
        return rows

    def first(self) -> Optional[dict]:
        rows = self.limit(1).all()
        return rows[0] if rows else None
