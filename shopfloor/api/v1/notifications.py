"""通知与看板API路由"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from ... import schemas
from ...core import NotificationService, dashboard_stats
from ...store import RowStore
from ..deps import get_store

router = APIRouter()


@router.get("/notifications/", response_model=List[schemas.Notification])
def list_notifications(unread_only: bool = False, limit: Optional[int] = None, store: RowStore = Depends(get_store)):
    """通知列表，按创建时间倒序"""
    return NotificationService(store).list_notifications(unread_only, limit)


@router.get("/notifications/unread-count")
def unread_count(store: RowStore = Depends(get_store)):
    return {"unread": NotificationService(store).unread_count()}


@router.post("/notifications/{notification_id}/read", response_model=schemas.Notification)
def mark_read(notification_id: str, store: RowStore = Depends(get_store)):
    return NotificationService(store).mark_read(notification_id)


@router.get("/dashboard/", response_model=schemas.DashboardStats)
def get_dashboard(store: RowStore = Depends(get_store)):
    """看板统计"""
    return dashboard_stats(store)
