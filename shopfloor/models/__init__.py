"""数据库模型模块

定义所有 SQLAlchemy ORM 模型
"""

from .sheet_row import SheetRow

__all__ = ["SheetRow"]
