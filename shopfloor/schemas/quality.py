"""质检相关数据结构定义"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from .base import SheetRecord
from .enums import Complexity, InspectionResult, InspectionStatus


class InspectionCriteria(SheetRecord):
    """质检触发条件

    specific_customer_id / specific_machine 只做存储，规则匹配不使用。
    """
    name: str
    enabled: bool = True
    min_quantity: Optional[float] = None
    min_weight: Optional[float] = None
    complexity: Optional[Complexity] = None
    specific_customer_id: Optional[str] = None
    specific_machine: Optional[str] = None


class QualityInspection(SheetRecord):
    """质检单"""
    production_order_id: str
    inspection_number: str
    trigger_reason: str = ""
    status: InspectionStatus = InspectionStatus.PENDING
    inspector_name: Optional[str] = None
    inspection_date: Optional[datetime] = None
    result: Optional[InspectionResult] = None
    notes: Optional[str] = None
    corrective_actions: Optional[str] = None


class CriterionSave(BaseModel):
    """创建/更新质检条件时的模型"""
    name: str
    enabled: bool = True
    min_quantity: Optional[float] = None
    min_weight: Optional[float] = None
    complexity: Optional[Complexity] = None
    specific_customer_id: Optional[str] = None
    specific_machine: Optional[str] = None


class InspectionComplete(BaseModel):
    """完成质检时的模型"""
    inspector_name: str
    result: Optional[InspectionResult] = None
    notes: Optional[str] = None
    corrective_actions: Optional[str] = None


class InspectionMetrics(BaseModel):
    total: int = 0
    approved: int = 0
    rejected: int = 0
    pending: int = 0
    approval_rate: float = 0.0
