"""通知仓储"""

from typing import List

from ..schemas import Notification
from ..store import tables
from .base import Repository


class NotificationRepository(Repository[Notification]):
    table = tables.NOTIFICATIONS
    record_type = Notification

    def newest_first(self) -> List[Notification]:
        return self.list_all(order_by="created_at", descending=True)
