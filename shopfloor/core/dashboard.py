"""看板统计"""

from typing import Callable

from ..crud import (
    InventoryRepository,
    ProductionOrderRepository,
    QualityInspectionRepository,
    SalesOrderRepository,
)
from ..schemas import DashboardStats, InspectionStatus, ProductionStatus, SalesOrderStatus
from ..store import RowStore
from ..utils.helpers import as_utc, utcnow


def dashboard_stats(store: RowStore, clock: Callable = utcnow) -> DashboardStats:
    """延期订单：进行中且计划完成时间已过"""
    orders = SalesOrderRepository(store).list_all()
    production = ProductionOrderRepository(store).list_all()
    inspections = QualityInspectionRepository(store).list_all()
    inventory = InventoryRepository(store).list_all()

    now = as_utc(clock())
    in_progress = [p for p in production if p.status == ProductionStatus.IN_PROGRESS]
    delayed = [p for p in in_progress if p.planned_end is not None and as_utc(p.planned_end) < now]

    return DashboardStats(
        total_orders=len(orders),
        orders_in_production=len(in_progress),
        delayed_orders=len(delayed),
        completed_orders=sum(1 for o in orders if o.status == SalesOrderStatus.COMPLETED),
        pending_inspections=sum(1 for i in inspections if i.status == InspectionStatus.PENDING),
        low_stock_items=sum(1 for i in inventory if i.quantity < i.minimum_stock),
    )
