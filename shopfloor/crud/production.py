"""生产相关仓储"""

from typing import List

from ..schemas import ProductionOrder, ProductionProcess
from ..store import tables
from .base import Repository


class ProductionOrderRepository(Repository[ProductionOrder]):
    table = tables.PRODUCTION_ORDERS
    record_type = ProductionOrder

    def newest_first(self) -> List[ProductionOrder]:
        return self.list_all(order_by="created_at", descending=True)


class ProductionProcessRepository(Repository[ProductionProcess]):
    table = tables.PRODUCTION_PROCESSES
    record_type = ProductionProcess

    def for_order(self, production_order_id: str) -> List[ProductionProcess]:
        """某生产订单的工序列表（按 sequence_order 排序）"""
        return self.list_by("production_order_id", production_order_id, order_by="sequence_order")
