"""通知服务

通知只追加不删除；通知铃由前端轮询 list/unread_count。
"""

import logging
from typing import List, Optional

from ..crud import NotificationRepository
from ..schemas import Notification, NotificationType
from ..store import RowStore

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, store: RowStore):
        self.notifications = NotificationRepository(store)

    def notify(
        self,
        type_: NotificationType,
        title: str,
        message: str,
        reference_type: Optional[str] = None,
        reference_id: Optional[str] = None,
    ) -> Notification:
        """追加一条未读通知"""
        notification = self.notifications.insert(
            type=type_,
            title=title,
            message=message,
            reference_type=reference_type,
            reference_id=reference_id,
            is_read=False,
        )
        logger.info("notification %s: %s", type_.value, message)
        return notification

    def list_notifications(self, unread_only: bool = False, limit: Optional[int] = None) -> List[Notification]:
        """按创建时间倒序"""
        notifications = self.notifications.newest_first()
        if unread_only:
            notifications = [n for n in notifications if not n.is_read]
        if limit is not None:
            notifications = notifications[:limit]
        return notifications

    def unread_count(self) -> int:
        return sum(1 for n in self.notifications.list_all() if not n.is_read)

    def mark_read(self, notification_id: str) -> Notification:
        return self.notifications.update_fields(notification_id, is_read=True)
