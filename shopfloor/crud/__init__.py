from .base import Repository
from .sales import (
    CustomerRepository,
    ProductRepository,
    SalesOrderRepository,
    SalesOrderItemRepository,
    ProposalRepository,
)
from .production import (
    ProductionOrderRepository,
    ProductionProcessRepository,
)
from .quality import (
    InspectionCriteriaRepository,
    QualityInspectionRepository,
)
from .purchasing import (
    PurchaseRepository,
    InventoryRepository,
    InventoryMovementRepository,
    SupplierRepository,
)
from .notification import NotificationRepository

__all__ = [
    "Repository",

    # 销售
    "CustomerRepository",
    "ProductRepository",
    "SalesOrderRepository",
    "SalesOrderItemRepository",
    "ProposalRepository",

    # 生产
    "ProductionOrderRepository",
    "ProductionProcessRepository",

    # 质检
    "InspectionCriteriaRepository",
    "QualityInspectionRepository",

    # 采购/库存
    "PurchaseRepository",
    "InventoryRepository",
    "InventoryMovementRepository",
    "SupplierRepository",

    # 通知
    "NotificationRepository",
]
