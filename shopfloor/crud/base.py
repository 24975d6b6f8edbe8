"""仓储基类

每个实体一个仓储类，封装对 RowStore 的读写，并把表格行解码为带类型的记录模型。
"""

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import ValidationError as DecodeError

from ..errors import NotFound
from ..schemas.base import SheetRecord
from ..store import RowStore

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=SheetRecord)


class Repository(Generic[T]):
    table: str = ""
    record_type: Type[T]

    def __init__(self, store: RowStore):
        self.store = store

    def _decode(self, row: dict) -> T:
        return self.record_type.model_validate(row)

    def _decode_all(self, rows: List[dict]) -> List[T]:
        """解码多行，跳过空行和无法解析的行"""
        records = []
        for row in rows:
            if not row.get("id"):
                continue
            try:
                records.append(self._decode(row))
            except DecodeError as exc:
                logger.warning("skipping malformed row %s in %s: %s", row.get("id"), self.table, exc)
        return records

    def list_all(self, order_by: Optional[str] = None, descending: bool = False) -> List[T]:
        """列出整张表"""
        query = self.store.table(self.table)
        if order_by:
            query = query.order_by(order_by, descending)
        return self._decode_all(query.all())

    def list_by(
        self,
        field: str,
        value: Any,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[T]:
        """按字段等值过滤"""
        query = self.store.table(self.table).filter(field, value)
        if order_by:
            query = query.order_by(order_by, descending)
        records = self._decode_all(query.all())
        return records if limit is None else records[:limit]

    def find_one(self, field: str, value: Any) -> Optional[T]:
        records = self._decode_all(self.store.table(self.table).filter(field, value).all())
        return records[0] if records else None

    def get_or_none(self, record_id: str) -> Optional[T]:
        return self.find_one("id", record_id)

    def get(self, record_id: str) -> T:
        """根据ID获取记录，不存在时抛出 NotFound"""
        record = self.get_or_none(record_id)
        if record is None:
            raise NotFound(self.table, record_id)
        return record

    def insert(self, **fields: Any) -> T:
        return self._decode(self.store.append(self.table, fields))

    def update_fields(self, record_id: str, **patch: Any) -> T:
        return self._decode(self.store.update(self.table, record_id, patch))

    def delete(self, record_id: str) -> None:
        self.store.delete(self.table, record_id)
