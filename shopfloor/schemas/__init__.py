"""API数据模型模块

表格记录模型（带类型转换）以及请求/响应结构体
"""

from .enums import (
    Complexity,
    SalesOrderStatus,
    ProposalStatus,
    Priority,
    ProductionStatus,
    ProcessType,
    ProcessStatus,
    InspectionStatus,
    InspectionResult,
    NotificationType,
    PurchaseStatus,
    MovementType,
    PROCESS_SEQUENCE,
)
from .base import SheetRecord
from .notification import Notification
from .sales import (
    Customer,
    Product,
    SalesOrder,
    SalesOrderItem,
    Proposal,
    CustomerCreate,
    ProductCreate,
    SalesOrderItemCreate,
    SalesOrderCreate,
    ProposalCreate,
    SalesOrderItemView,
    SalesOrderView,
    ProposalView,
)
from .quality import (
    InspectionCriteria,
    QualityInspection,
    CriterionSave,
    InspectionComplete,
    InspectionMetrics,
)
from .production import (
    ProductionOrder,
    ProductionProcess,
    ProcessStart,
    ApprovalResult,
    ProductionOrderDetail,
)
from .purchasing import (
    Purchase,
    Inventory,
    InventoryMovement,
    Supplier,
    PurchaseCreate,
    PurchaseOrder,
    InventoryCreate,
    SupplierSave,
)
from .dashboard import DashboardStats

__all__ = [
    # 枚举
    "Complexity",
    "SalesOrderStatus",
    "ProposalStatus",
    "Priority",
    "ProductionStatus",
    "ProcessType",
    "ProcessStatus",
    "InspectionStatus",
    "InspectionResult",
    "NotificationType",
    "PurchaseStatus",
    "MovementType",
    "PROCESS_SEQUENCE",

    # 记录
    "SheetRecord",
    "Customer",
    "Product",
    "SalesOrder",
    "SalesOrderItem",
    "Proposal",
    "ProductionOrder",
    "ProductionProcess",
    "InspectionCriteria",
    "QualityInspection",
    "Notification",
    "Purchase",
    "Inventory",
    "InventoryMovement",
    "Supplier",

    # 请求
    "CustomerCreate",
    "ProductCreate",
    "SalesOrderItemCreate",
    "SalesOrderCreate",
    "ProposalCreate",
    "ProcessStart",
    "CriterionSave",
    "InspectionComplete",
    "PurchaseCreate",
    "PurchaseOrder",
    "InventoryCreate",
    "SupplierSave",

    # 视图
    "SalesOrderItemView",
    "SalesOrderView",
    "ProposalView",
    "ApprovalResult",
    "ProductionOrderDetail",
    "InspectionMetrics",
    "DashboardStats",
]
