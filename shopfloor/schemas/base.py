"""表格记录基类

表格里读出的值全是字符串。每个实体模型声明字段类型和默认值，
由 pydantic 完成转换（"150" -> 150.0，"true"/"TRUE" -> True），
空单元格视为未填写，使用字段默认值。
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, model_validator


class SheetRecord(BaseModel):
    """表格记录基类"""
    id: str
    created_at: Optional[datetime] = None

    class Config:
        # 表格里可能有额外的列，原样保留
        extra = "allow"

    @model_validator(mode="before")
    @classmethod
    def _blank_cells_to_defaults(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value != ""}
        return data
