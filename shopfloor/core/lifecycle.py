"""生产工序生命周期

工序状态：pending -> in_progress -> completed；暂停会回到 pending，
同时把生产订单置为 on_hold。skipped 没有任何操作会进入，但在汇总时
与 completed 一样视为已结束。

生产订单的状态/当前工序随工序操作一起更新，进度在读取时计算，不存储。
"""

import logging
from typing import Callable, List

from ..crud import (
    ProductionOrderRepository,
    ProductionProcessRepository,
    ProductRepository,
    QualityInspectionRepository,
)
from ..errors import InvalidTransition, ValidationError
from ..schemas import (
    NotificationType,
    ProcessStatus,
    ProductionOrderDetail,
    ProductionProcess,
    ProductionStatus,
)
from ..store import RowStore
from ..utils.helpers import as_utc, utcnow
from .notifications import NotificationService

logger = logging.getLogger(__name__)

FINISHED_STATUSES = (ProcessStatus.COMPLETED, ProcessStatus.SKIPPED)


def compute_progress(processes: List[ProductionProcess]) -> float:
    """已完成工序数 / 工序总数，没有工序时为 0"""
    if not processes:
        return 0.0
    completed = sum(1 for p in processes if p.status == ProcessStatus.COMPLETED)
    return completed / len(processes)


class ProductionLifecycleService:
    def __init__(self, store: RowStore, clock: Callable = utcnow):
        self.clock = clock
        self.orders = ProductionOrderRepository(store)
        self.processes = ProductionProcessRepository(store)
        self.products = ProductRepository(store)
        self.inspections = QualityInspectionRepository(store)
        self.notifier = NotificationService(store)

    def start(self, process_id: str, operator_name: str, machine: str = None) -> ProductionProcess:
        """开始工序，操作员必填"""
        if not operator_name or not operator_name.strip():
            raise ValidationError("Operator name is required")
        process = self.processes.get(process_id)
        if process.status != ProcessStatus.PENDING:
            raise InvalidTransition(f"Process {process.process_type.value} is {process.status.value}, cannot start")

        now = self.clock()
        process = self.processes.update_fields(
            process.id,
            status=ProcessStatus.IN_PROGRESS,
            started_at=now,
            operator_name=operator_name.strip(),
            machine_used=machine or None,
        )

        order = self.orders.get(process.production_order_id)
        if order.status == ProductionStatus.PENDING:
            self.orders.update_fields(
                order.id,
                status=ProductionStatus.IN_PROGRESS,
                actual_start=now,
                current_process=process.process_type,
            )
        elif order.status == ProductionStatus.ON_HOLD:
            # 暂停后恢复，不改 actual_start
            self.orders.update_fields(
                order.id,
                status=ProductionStatus.IN_PROGRESS,
                current_process=process.process_type,
            )
        else:
            self.orders.update_fields(order.id, current_process=process.process_type)

        logger.info("order %s: %s started by %s", order.order_number, process.process_type.value, operator_name)
        return process

    def complete(self, process_id: str) -> ProductionProcess:
        """完成工序

        未开始（没有 started_at）或已完成的工序直接返回，不重复计时也不重复通知。
        """
        process = self.processes.get(process_id)
        if process.status == ProcessStatus.COMPLETED or process.started_at is None:
            logger.debug("complete ignored for process %s (%s)", process.id, process.status.value)
            return process

        now = self.clock()
        actual_minutes = round((as_utc(now) - as_utc(process.started_at)).total_seconds() / 60)
        process = self.processes.update_fields(
            process.id,
            status=ProcessStatus.COMPLETED,
            completed_at=now,
            actual_minutes=actual_minutes,
        )

        order = self.orders.get(process.production_order_id)
        siblings = self.processes.for_order(order.id)
        if all(p.status in FINISHED_STATUSES for p in siblings):
            self.orders.update_fields(
                order.id,
                status=ProductionStatus.COMPLETED,
                actual_end=now,
                current_process=None,
            )
            self.notifier.notify(
                NotificationType.PROCESS_COMPLETED,
                "Production order completed",
                f"Order {order.order_number} was completed",
                reference_type="production_order",
                reference_id=order.id,
            )
            logger.info("order %s completed", order.order_number)
            return process

        upcoming = [
            p for p in siblings
            if p.status == ProcessStatus.PENDING and p.sequence_order > process.sequence_order
        ]
        if upcoming:
            next_process = min(upcoming, key=lambda p: p.sequence_order)
            # 只切换当前工序，下一道工序需要操作员手动开始
            self.orders.update_fields(order.id, current_process=next_process.process_type)
        return process

    def pause(self, process_id: str) -> ProductionProcess:
        """暂停工序：回到 pending 并清除开始时间/操作员/机台，生产订单 on_hold"""
        process = self.processes.get(process_id)
        if process.status != ProcessStatus.IN_PROGRESS:
            raise InvalidTransition(f"Process {process.process_type.value} is {process.status.value}, cannot pause")

        process = self.processes.update_fields(
            process.id,
            status=ProcessStatus.PENDING,
            started_at=None,
            operator_name=None,
            machine_used=None,
        )
        order = self.orders.update_fields(process.production_order_id, status=ProductionStatus.ON_HOLD)
        logger.info("order %s on hold at %s", order.order_number, process.process_type.value)
        return process

    def progress(self, production_order_id: str) -> float:
        return compute_progress(self.processes.for_order(production_order_id))

    def detail(self, production_order_id: str) -> ProductionOrderDetail:
        """生产订单详情：产品、工序、进度、质检单"""
        order = self.orders.get(production_order_id)
        processes = self.processes.for_order(order.id)
        return ProductionOrderDetail(
            order=order,
            product=self.products.get_or_none(order.product_id),
            processes=processes,
            progress=compute_progress(processes),
            inspections=self.inspections.for_order(order.id),
        )
