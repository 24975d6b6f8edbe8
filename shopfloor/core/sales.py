"""销售录入

客户、产品、销售订单（含明细）以及报价单。
订单号 PV-xxxxxxxx，报价号 PROP-xxxxxxxx，均取毫秒时间戳后8位。
"""

import logging
from typing import Callable, Dict, List, Optional

from ..crud import (
    CustomerRepository,
    ProductRepository,
    ProposalRepository,
    SalesOrderItemRepository,
    SalesOrderRepository,
)
from ..errors import ValidationError
from ..schemas import (
    Customer,
    CustomerCreate,
    Product,
    ProductCreate,
    Proposal,
    ProposalCreate,
    ProposalStatus,
    ProposalView,
    SalesOrder,
    SalesOrderCreate,
    SalesOrderItemView,
    SalesOrderStatus,
    SalesOrderView,
)
from ..store import RowStore
from ..utils.helpers import proposal_number, sales_order_number, utcnow

logger = logging.getLogger(__name__)


class SalesService:
    def __init__(self, store: RowStore, clock: Callable = utcnow):
        self.clock = clock
        self.customers = CustomerRepository(store)
        self.products = ProductRepository(store)
        self.orders = SalesOrderRepository(store)
        self.items = SalesOrderItemRepository(store)
        self.proposals = ProposalRepository(store)

    # 客户
    def create_customer(self, payload: CustomerCreate) -> Customer:
        if not payload.name.strip():
            raise ValidationError("Customer name is required")
        return self.customers.insert(**payload.model_dump())

    def list_customers(self) -> List[Customer]:
        return self.customers.list_all(order_by="name")

    # 产品
    def create_product(self, payload: ProductCreate) -> Product:
        if not payload.name.strip():
            raise ValidationError("Product name is required")
        return self.products.insert(**payload.model_dump())

    def list_products(self) -> List[Product]:
        return self.products.list_all(order_by="name")

    # 销售订单
    def create_sales_order(self, payload: SalesOrderCreate) -> SalesOrderView:
        """创建草稿订单及明细

        先写订单再逐条写明细，明细写入失败时订单已存在。
        """
        if not payload.customer_id or not payload.items or not payload.items[0].product_id:
            raise ValidationError("Customer and at least one item with a product are required")
        customer = self.customers.get(payload.customer_id)

        now = self.clock()
        order = self.orders.insert(
            order_number=sales_order_number(now),
            customer_id=customer.id,
            created_by=payload.created_by,
            notes=payload.notes,
            status=SalesOrderStatus.DRAFT,
            updated_at=now,
        )
        items = []
        for item in payload.items:
            items.append(self.items.insert(
                sales_order_id=order.id,
                product_id=item.product_id,
                quantity=item.quantity,
                unit_price=item.unit_price,
                total_price=item.unit_price * item.quantity,
                drawing_url=item.drawing_url,
                special_requirements=item.special_requirements,
            ))
        logger.info("sales order %s created with %d items", order.order_number, len(items))
        products = self._products_by_id()
        return SalesOrderView(
            order=order,
            customer=customer,
            items=[SalesOrderItemView(item=i, product=products.get(i.product_id)) for i in items],
        )

    def _products_by_id(self) -> Dict[str, Product]:
        return {p.id: p for p in self.products.list_all()}

    def _view(self, order: SalesOrder, customers: Dict[str, Customer], products: Dict[str, Product]) -> SalesOrderView:
        return SalesOrderView(
            order=order,
            customer=customers.get(order.customer_id),
            items=[
                SalesOrderItemView(item=item, product=products.get(item.product_id))
                for item in self.items.for_order(order.id)
            ],
        )

    def list_sales_orders(self, status: Optional[SalesOrderStatus] = None) -> List[SalesOrderView]:
        """按创建时间倒序，关联客户和明细"""
        customers = {c.id: c for c in self.customers.list_all()}
        products = self._products_by_id()
        orders = self.orders.newest_first()
        if status is not None:
            orders = [o for o in orders if o.status == status]
        return [self._view(o, customers, products) for o in orders]

    def get_sales_order(self, sales_order_id: str) -> SalesOrderView:
        order = self.orders.get(sales_order_id)
        customers = {c.id: c for c in self.customers.list_all()}
        return self._view(order, customers, self._products_by_id())

    def delete_sales_order(self, sales_order_id: str) -> None:
        """只删除订单行，明细和生产记录保留"""
        self.orders.delete(sales_order_id)
        logger.info("sales order %s deleted", sales_order_id)

    # 报价单
    def create_proposal(self, payload: ProposalCreate) -> Proposal:
        """根据订单明细生成报价，订单进入 quoted"""
        order = self.orders.get(payload.sales_order_id)
        if order.status not in (SalesOrderStatus.DRAFT, SalesOrderStatus.QUOTED):
            raise ValidationError(f"Sales order {order.order_number} is {order.status.value}, cannot quote")
        subtotal = sum(item.total_price for item in self.items.for_order(order.id))
        proposal = self.proposals.insert(
            sales_order_id=order.id,
            proposal_number=proposal_number(self.clock()),
            subtotal=subtotal,
            discount=payload.discount,
            total=subtotal - payload.discount,
            delivery_days=payload.delivery_days,
            payment_terms=payload.payment_terms,
            validity_days=payload.validity_days,
            terms_conditions=payload.terms_conditions,
            status=ProposalStatus.PENDING,
        )
        self.orders.update_fields(order.id, status=SalesOrderStatus.QUOTED)
        logger.info("proposal %s created for order %s", proposal.proposal_number, order.order_number)
        return proposal

    def list_proposals(self) -> List[ProposalView]:
        """按创建时间倒序，关联销售订单、客户和明细"""
        customers = {c.id: c for c in self.customers.list_all()}
        products = self._products_by_id()
        orders = {o.id: o for o in self.orders.list_all()}
        views = []
        for proposal in self.proposals.newest_first():
            order = orders.get(proposal.sales_order_id)
            views.append(ProposalView(
                proposal=proposal,
                sales_order=self._view(order, customers, products) if order else None,
            ))
        return views

    def get_proposal(self, proposal_id: str) -> ProposalView:
        proposal = self.proposals.get(proposal_id)
        order = self.orders.get_or_none(proposal.sales_order_id)
        if order is None:
            return ProposalView(proposal=proposal)
        customers = {c.id: c for c in self.customers.list_all()}
        return ProposalView(proposal=proposal, sales_order=self._view(order, customers, self._products_by_id()))
