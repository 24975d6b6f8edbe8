"""表格行模型

本地 sql 后端用一张表模拟整个电子表格：每个工作表的每一行是一条记录，
单元格以 JSON 对象（字段名 -> 字符串）存储。
"""

from sqlalchemy import Column, Integer, String, JSON
from ..database.connection import Base


class SheetRow(Base):
    """工作表行"""
    __tablename__ = "sheet_rows"

    id = Column(Integer, primary_key=True, index=True)
    sheet = Column(String(128), nullable=False, index=True)  # 工作表名称
    position = Column(Integer, nullable=False)  # 行顺序，保持插入顺序
    cells = Column(JSON, nullable=False, default=dict)  # 单元格
