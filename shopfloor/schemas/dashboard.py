"""看板统计"""

from pydantic import BaseModel


class DashboardStats(BaseModel):
    total_orders: int = 0
    orders_in_production: int = 0
    delayed_orders: int = 0
    completed_orders: int = 0
    pending_inspections: int = 0
    low_stock_items: int = 0
