"""SQL 行存储后端

用 sheet_rows 表模拟电子表格，供本地开发和测试使用。
"""

import logging
from contextlib import contextmanager
from typing import List

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from ..errors import StoreUnavailable
from ..models import SheetRow
from .backends import Row, RowBackend

logger = logging.getLogger(__name__)


class SqlBackend(RowBackend):
    def __init__(self, session_factory):
        self.session_factory = session_factory

    @contextmanager
    def _session(self, sheet: str):
        db = self.session_factory()
        try:
            yield db
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.warning("sql backend failed on sheet %s: %s", sheet, exc)
            raise StoreUnavailable(f"Row store failed on {sheet}: {exc}") from exc
        finally:
            db.close()

    @staticmethod
    def _rows(db, sheet: str):
        return db.query(SheetRow).filter(SheetRow.sheet == sheet).order_by(SheetRow.position).all()

    def _row_at(self, db, sheet: str, index: int) -> SheetRow:
        rows = self._rows(db, sheet)
        if index < 0 or index >= len(rows):
            raise IndexError(f"Row {index} out of range for sheet {sheet}")
        return rows[index]

    def read_rows(self, sheet: str) -> List[Row]:
        with self._session(sheet) as db:
            return [dict(r.cells or {}) for r in self._rows(db, sheet)]

    def append_row(self, sheet: str, row: Row) -> None:
        with self._session(sheet) as db:
            last = db.query(func.max(SheetRow.position)).filter(SheetRow.sheet == sheet).scalar()
            db.add(SheetRow(sheet=sheet, position=(last or 0) + 1, cells=dict(row)))

    def update_row(self, sheet: str, index: int, row: Row) -> None:
        with self._session(sheet) as db:
            db_row = self._row_at(db, sheet, index)
            # 重新赋值，JSON 列才会被识别为已修改
            db_row.cells = dict(row)

    def delete_row(self, sheet: str, index: int) -> None:
        with self._session(sheet) as db:
            db.delete(self._row_at(db, sheet, index))
