"""行存储适配器

把逻辑表名翻译为工作表名，整表读取为 字段名 -> 字符串 的记录，
提供 append/update/delete。读取结果按工作表缓存，任何写操作成功后
显式失效该工作表的缓存。

没有事务：多次写入中途失败时，之前成功的写入保留，不回滚也不重试。
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from ..errors import NotFound
from ..utils.helpers import cell_text, generate_id, utcnow
from .backends import Row, RowBackend
from .cache import ReadCache
from .query import Query
from .tables import sheet_name

logger = logging.getLogger(__name__)


class RowStore:
    def __init__(self, backend: RowBackend, cache: Optional[ReadCache] = None, clock: Callable = utcnow):
        self.backend = backend
        self.cache = cache if cache is not None else ReadCache()
        self.clock = clock

    @staticmethod
    def _encode(fields: Dict[str, Any]) -> Row:
        return {key: cell_text(value) for key, value in fields.items()}

    @staticmethod
    def _index_of(rows: List[Row], record_id: str) -> int:
        for index, row in enumerate(rows):
            if row.get("id") == record_id:
                return index
        return -1

    def fetch_all(self, table: str) -> List[Row]:
        """读取整张表（5秒内复用缓存），返回副本"""
        sheet = sheet_name(table)
        rows = self.cache.get(sheet)
        if rows is None:
            rows = self.backend.read_rows(sheet)
            self.cache.put(sheet, rows)
        return [dict(row) for row in rows]

    def append(self, table: str, fields: Dict[str, Any]) -> Row:
        """追加一行；缺少 id/created_at 时自动生成"""
        sheet = sheet_name(table)
        now = self.clock()
        record = self._encode(fields)
        record["id"] = record.get("id") or generate_id(now)
        record["created_at"] = record.get("created_at") or cell_text(now)
        self.backend.append_row(sheet, record)
        self.cache.invalidate(sheet)
        logger.debug("appended %s to %s", record["id"], table)
        return record

    def update(self, table: str, record_id: str, patch: Dict[str, Any]) -> Row:
        """按 id 合并更新；找不到时抛出 NotFound"""
        sheet = sheet_name(table)
        rows = self.backend.read_rows(sheet)
        index = self._index_of(rows, record_id)
        if index == -1:
            raise NotFound(table, record_id)
        record = {**rows[index], **self._encode(patch)}
        record["updated_at"] = cell_text(self.clock())
        self.backend.update_row(sheet, index, record)
        self.cache.invalidate(sheet)
        logger.debug("updated %s in %s", record_id, table)
        return record

    def delete(self, table: str, record_id: str) -> None:
        sheet = sheet_name(table)
        rows = self.backend.read_rows(sheet)
        index = self._index_of(rows, record_id)
        if index == -1:
            raise NotFound(table, record_id)
        self.backend.delete_row(sheet, index)
        self.cache.invalidate(sheet)
        logger.debug("deleted %s from %s", record_id, table)

    def table(self, table: str) -> Query:
        """开始一个链式查询"""
        return Query(self, table)
