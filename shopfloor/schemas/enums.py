"""状态与类型枚举"""

from enum import Enum


class Complexity(str, Enum):
    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"


class SalesOrderStatus(str, Enum):
    DRAFT = "draft"
    QUOTED = "quoted"
    APPROVED = "approved"
    IN_PRODUCTION = "in_production"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ProposalStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class ProductionStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"


class ProcessType(str, Enum):
    TURNING = "turning"
    MILLING = "milling"
    DRILLING = "drilling"
    GRINDING = "grinding"


class ProcessStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    # 没有任何操作会进入 skipped，保留该状态仅用于兼容已有数据
    SKIPPED = "skipped"


class InspectionStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    APPROVED = "approved"
    REJECTED = "rejected"


class InspectionResult(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    CONDITIONAL = "conditional"


class NotificationType(str, Enum):
    ORDER_APPROVED = "order_approved"
    PRODUCTION_DELAYED = "production_delayed"
    INSPECTION_REQUIRED = "inspection_required"
    STOCK_LOW = "stock_low"
    PROCESS_COMPLETED = "process_completed"
    ORDER_CREATED = "order_created"


class PurchaseStatus(str, Enum):
    REQUESTED = "requested"
    ORDERED = "ordered"
    RECEIVED = "received"


class MovementType(str, Enum):
    IN = "in"
    OUT = "out"


# 固定工序顺序
PROCESS_SEQUENCE = [
    ProcessType.TURNING,
    ProcessType.MILLING,
    ProcessType.DRILLING,
    ProcessType.GRINDING,
]
