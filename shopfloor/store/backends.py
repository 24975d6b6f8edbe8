"""行存储后端接口

后端只负责按工作表读写原始行（字段名 -> 字符串），
缓存、ID 和时间戳由 RowStore 处理。
"""

from typing import Dict, List

Row = Dict[str, str]


class RowBackend:
    """行存储后端基类

    index 指数据行的下标（从 0 开始，不含表头行）。
    传输失败时抛出 StoreUnavailable。
    """

    def read_rows(self, sheet: str) -> List[Row]:
        raise NotImplementedError

    def append_row(self, sheet: str, row: Row) -> None:
        raise NotImplementedError

    def update_row(self, sheet: str, index: int, row: Row) -> None:
        raise NotImplementedError

    def delete_row(self, sheet: str, index: int) -> None:
        raise NotImplementedError


def build_backend(settings) -> RowBackend:
    """根据配置创建后端"""
    if settings.STORE_BACKEND == "sheets":
        from .sheets_backend import SheetsBackend
        return SheetsBackend(
            spreadsheet_id=settings.GOOGLE_SPREADSHEET_ID,
            api_key=settings.GOOGLE_API_KEY,
            access_token=settings.GOOGLE_ACCESS_TOKEN,
            base_url=settings.SHEETS_BASE_URL,
            timeout=settings.HTTP_TIMEOUT,
        )
    if settings.STORE_BACKEND == "sql":
        from ..database.connection import SessionLocal
        from .sql_backend import SqlBackend
        return SqlBackend(SessionLocal)
    raise ValueError(f"Unknown STORE_BACKEND: {settings.STORE_BACKEND}")
