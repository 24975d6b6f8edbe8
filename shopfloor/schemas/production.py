"""生产相关数据结构定义"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from .base import SheetRecord
from .enums import Priority, ProcessStatus, ProcessType, ProductionStatus
from .notification import Notification
from .quality import QualityInspection
from .sales import Product, Proposal, SalesOrder


class ProductionOrder(SheetRecord):
    """生产订单，每个销售订单明细一条"""
    order_number: str
    sales_order_id: str
    sales_order_item_id: str
    product_id: str
    quantity: float
    priority: Priority = Priority.MEDIUM
    status: ProductionStatus = ProductionStatus.PENDING
    planned_start: Optional[datetime] = None
    planned_end: Optional[datetime] = None
    actual_start: Optional[datetime] = None
    actual_end: Optional[datetime] = None
    current_process: Optional[ProcessType] = None
    updated_at: Optional[datetime] = None


class ProductionProcess(SheetRecord):
    """生产工序，每个生产订单固定4条"""
    production_order_id: str
    process_type: ProcessType
    sequence_order: int
    status: ProcessStatus = ProcessStatus.PENDING
    estimated_minutes: Optional[int] = None
    actual_minutes: Optional[int] = None
    operator_name: Optional[str] = None
    machine_used: Optional[str] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    notes: Optional[str] = None


class ProcessStart(BaseModel):
    """开始工序时的模型"""
    operator_name: str
    machine_used: Optional[str] = None


class ApprovalResult(BaseModel):
    """报价审批的扇出结果"""
    proposal: Proposal
    sales_order: SalesOrder
    production_orders: List[ProductionOrder] = []
    processes: List[ProductionProcess] = []
    inspections: List[QualityInspection] = []
    notifications: List[Notification] = []


class ProductionOrderDetail(BaseModel):
    order: ProductionOrder
    product: Optional[Product] = None
    processes: List[ProductionProcess] = []
    progress: float = 0.0
    inspections: List[QualityInspection] = []
