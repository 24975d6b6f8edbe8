"""工具函数模块

时间戳、编号生成以及表格单元格值的转换。
表格里所有值都是字符串，写入前统一用 cell_text 转换。
"""

import math
import random
import string
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

_BASE36 = string.digits + string.ascii_lowercase


def utcnow() -> datetime:
    """当前 UTC 时间（带时区）"""
    return datetime.now(timezone.utc)


def as_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """把不带时区的时间当作 UTC 处理"""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_iso(dt: datetime) -> str:
    """格式化为 2025-01-01T08:00:00.000Z"""
    return as_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def epoch_ms(dt: datetime) -> int:
    return int(as_utc(dt).timestamp() * 1000)


def random_base36(length: int) -> str:
    return "".join(random.choice(_BASE36) for _ in range(length))


def generate_id(now: Optional[datetime] = None) -> str:
    """生成记录ID：毫秒时间戳 + 9位随机后缀"""
    now = now or utcnow()
    return f"{epoch_ms(now)}-{random_base36(9)}"


def _ms_tail(now: datetime) -> str:
    return str(epoch_ms(now))[-8:]


def sales_order_number(now: datetime) -> str:
    return f"PV-{_ms_tail(now)}"


def proposal_number(now: datetime) -> str:
    return f"PROP-{_ms_tail(now)}"


def production_order_number(now: datetime) -> str:
    """生产订单号，不检查重复"""
    return f"OP-{_ms_tail(now)}-{random_base36(4).upper()}"


def inspection_number(now: datetime) -> str:
    return f"INSP-{_ms_tail(now)}"


def cell_text(value: Any) -> str:
    """把 Python 值转换为单元格字符串"""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return to_iso(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_number(value: Any) -> Optional[float]:
    """解析为有限数字；nan/inf 不算数字"""
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def loose_equals(left: Any, right: Any) -> bool:
    """等值比较：150 == "150"，150.0 == "150"，True == "true"

    只有一侧是 int/float 时才按数字比较，其余按单元格文本精确比较
    （区分大小写，"007" != "7"）。
    """
    if _is_number(left) or _is_number(right):
        left_num, right_num = _as_number(left), _as_number(right)
        if left_num is not None and right_num is not None:
            return left_num == right_num
    return cell_text(left) == cell_text(right)


def sort_key(value: Any):
    """单字段排序键：数字在前，其次字符串，空值最后"""
    if value is None or value == "":
        return (2, 0.0, "")
    number = _as_number(value)
    if number is not None:
        return (0, number, "")
    return (1, 0.0, cell_text(value))
