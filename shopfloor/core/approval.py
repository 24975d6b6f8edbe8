"""报价审批

审批一份报价会扇出多条记录：
1. 报价 -> approved，记录 approved_at
2. 销售订单 -> approved
3. 读取订单明细并关联产品
4. 每条明细：
   a. 生成生产订单号
   b. 创建生产订单（pending / medium，计划周期固定14天）
   c. 创建4道工序：车 -> 铣 -> 钻 -> 磨
   d. 重新读取启用的质检条件并判断
   e. 需要质检时创建质检单和 inspection_required 通知
5. 销售订单 -> in_production
6. 追加 order_approved 通知

每一步都是独立的存储写入，没有事务也没有补偿：中途失败时已完成的写入保留，
异常直接抛给调用方。同一 proposal_id 的并发调用由单飞保护拒绝，
非 pending 的报价不能再次审批或驳回。
"""

import logging
from datetime import timedelta
from typing import Callable, Dict, Optional

from ..config.settings import settings
from ..crud import (
    InspectionCriteriaRepository,
    ProductionOrderRepository,
    ProductionProcessRepository,
    ProductRepository,
    ProposalRepository,
    QualityInspectionRepository,
    SalesOrderItemRepository,
    SalesOrderRepository,
)
from ..errors import InvalidTransition
from ..schemas import (
    PROCESS_SEQUENCE,
    ApprovalResult,
    InspectionStatus,
    NotificationType,
    Priority,
    ProcessStatus,
    Product,
    ProductionStatus,
    Proposal,
    ProposalStatus,
    SalesOrder,
    SalesOrderItem,
    SalesOrderStatus,
)
from ..store import RowStore
from ..utils.helpers import inspection_number, production_order_number, utcnow
from .inspection import matching_criteria
from .notifications import NotificationService
from .single_flight import SingleFlight, approval_guard

logger = logging.getLogger(__name__)

APPROVABLE_ORDER_STATUSES = (SalesOrderStatus.QUOTED, SalesOrderStatus.APPROVED)


class ProposalApprovalService:
    def __init__(
        self,
        store: RowStore,
        clock: Callable = utcnow,
        guard: Optional[SingleFlight] = None,
        lead_days: Optional[int] = None,
        estimated_minutes: Optional[int] = None,
    ):
        self.clock = clock
        self.guard = guard if guard is not None else approval_guard
        self.lead_days = lead_days if lead_days is not None else settings.PLANNED_LEAD_DAYS
        self.estimated_minutes = estimated_minutes if estimated_minutes is not None else settings.PROCESS_ESTIMATED_MINUTES

        self.proposals = ProposalRepository(store)
        self.sales_orders = SalesOrderRepository(store)
        self.items = SalesOrderItemRepository(store)
        self.products = ProductRepository(store)
        self.production_orders = ProductionOrderRepository(store)
        self.processes = ProductionProcessRepository(store)
        self.criteria = InspectionCriteriaRepository(store)
        self.inspections = QualityInspectionRepository(store)
        self.notifier = NotificationService(store)

    def _load_pending(self, proposal_id: str):
        proposal = self.proposals.get(proposal_id)
        if proposal.status != ProposalStatus.PENDING:
            raise InvalidTransition(f"Proposal {proposal.proposal_number} is already {proposal.status.value}")
        sales_order = self.sales_orders.get(proposal.sales_order_id)
        return proposal, sales_order

    def approve(self, proposal_id: str) -> ApprovalResult:
        """审批报价并创建生产订单"""
        with self.guard.claim(proposal_id):
            proposal, sales_order = self._load_pending(proposal_id)
            if sales_order.status not in APPROVABLE_ORDER_STATUSES:
                raise InvalidTransition(
                    f"Sales order {sales_order.order_number} is {sales_order.status.value}, cannot approve"
                )
            return self._approve(proposal, sales_order)

    def _approve(self, proposal: Proposal, sales_order: SalesOrder) -> ApprovalResult:
        proposal = self.proposals.update_fields(
            proposal.id,
            status=ProposalStatus.APPROVED,
            approved_at=self.clock(),
        )
        self.sales_orders.update_fields(sales_order.id, status=SalesOrderStatus.APPROVED)

        products: Dict[str, Product] = {p.id: p for p in self.products.list_all()}
        result = ApprovalResult(proposal=proposal, sales_order=sales_order)

        for item in self.items.for_order(sales_order.id):
            self._fan_out_item(sales_order, item, products.get(item.product_id), result)

        result.sales_order = self.sales_orders.update_fields(
            sales_order.id, status=SalesOrderStatus.IN_PRODUCTION
        )
        result.notifications.append(self.notifier.notify(
            NotificationType.ORDER_APPROVED,
            "Proposal approved",
            f"Proposal {proposal.proposal_number} approved and production orders created",
            reference_type="proposal",
            reference_id=proposal.id,
        ))
        logger.info(
            "approved proposal %s: %d production orders, %d inspections",
            proposal.proposal_number, len(result.production_orders), len(result.inspections),
        )
        return result

    def _fan_out_item(
        self,
        sales_order: SalesOrder,
        item: SalesOrderItem,
        product: Optional[Product],
        result: ApprovalResult,
    ) -> None:
        now = self.clock()
        order_number = production_order_number(now)
        production_order = self.production_orders.insert(
            order_number=order_number,
            sales_order_id=sales_order.id,
            sales_order_item_id=item.id,
            product_id=item.product_id,
            quantity=item.quantity,
            priority=Priority.MEDIUM,
            status=ProductionStatus.PENDING,
            planned_start=now,
            planned_end=now + timedelta(days=self.lead_days),
            updated_at=now,
        )
        result.production_orders.append(production_order)

        for sequence, process_type in enumerate(PROCESS_SEQUENCE, start=1):
            result.processes.append(self.processes.insert(
                production_order_id=production_order.id,
                process_type=process_type,
                sequence_order=sequence,
                status=ProcessStatus.PENDING,
                estimated_minutes=self.estimated_minutes,
            ))

        # 每条明细重新读取条件，不保证整个循环看到同一份快照
        matched = matching_criteria(item, product, self.criteria.enabled())
        if not matched:
            return

        number = inspection_number(self.clock())
        result.inspections.append(self.inspections.insert(
            production_order_id=production_order.id,
            inspection_number=number,
            trigger_reason="Automatic criteria met: " + ", ".join(c.name for c in matched),
            status=InspectionStatus.PENDING,
        ))
        result.notifications.append(self.notifier.notify(
            NotificationType.INSPECTION_REQUIRED,
            "Inspection required",
            f"Inspection {number} created for order {order_number}",
            reference_type="quality_inspection",
            reference_id=production_order.id,
        ))

    def reject(self, proposal_id: str) -> Proposal:
        """驳回报价并取消销售订单，不创建任何生产记录"""
        with self.guard.claim(proposal_id):
            proposal, sales_order = self._load_pending(proposal_id)
            proposal = self.proposals.update_fields(proposal.id, status=ProposalStatus.REJECTED)
            self.sales_orders.update_fields(sales_order.id, status=SalesOrderStatus.CANCELLED)
        logger.info("rejected proposal %s", proposal.proposal_number)
        return proposal
