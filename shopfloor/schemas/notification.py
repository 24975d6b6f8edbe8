"""通知数据结构定义"""

from typing import Optional

from .base import SheetRecord
from .enums import NotificationType


class Notification(SheetRecord):
    """通知，只追加，只会更新 is_read"""
    type: NotificationType
    title: str
    message: str = ""
    reference_type: Optional[str] = None
    reference_id: Optional[str] = None
    is_read: bool = False
