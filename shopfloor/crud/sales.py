"""销售相关仓储"""

from typing import List

from ..schemas import Customer, Product, Proposal, SalesOrder, SalesOrderItem
from ..store import tables
from .base import Repository


class CustomerRepository(Repository[Customer]):
    table = tables.CUSTOMERS
    record_type = Customer


class ProductRepository(Repository[Product]):
    table = tables.PRODUCTS
    record_type = Product


class SalesOrderRepository(Repository[SalesOrder]):
    table = tables.SALES_ORDERS
    record_type = SalesOrder

    def newest_first(self) -> List[SalesOrder]:
        return self.list_all(order_by="created_at", descending=True)


class SalesOrderItemRepository(Repository[SalesOrderItem]):
    table = tables.SALES_ORDER_ITEMS
    record_type = SalesOrderItem

    def for_order(self, sales_order_id: str) -> List[SalesOrderItem]:
        """订单明细，按存储顺序"""
        return self.list_by("sales_order_id", sales_order_id)


class ProposalRepository(Repository[Proposal]):
    table = tables.PROPOSALS
    record_type = Proposal

    def newest_first(self) -> List[Proposal]:
        return self.list_all(order_by="created_at", descending=True)
