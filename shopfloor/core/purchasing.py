"""采购与库存

采购单：requested -> ordered -> received。
收货时按物料名称找到库存行增加数量（找不到则新建，最低库存 0），
并记录一条入库流水，和报价审批同样是多步写入、没有事务。
"""

import logging
from typing import Callable, List, Optional

from ..crud import (
    InventoryMovementRepository,
    InventoryRepository,
    ProductionOrderRepository,
    PurchaseRepository,
)
from ..errors import InvalidTransition, ValidationError
from ..schemas import (
    Inventory,
    InventoryCreate,
    InventoryMovement,
    MovementType,
    NotificationType,
    Purchase,
    PurchaseCreate,
    PurchaseOrder,
    PurchaseStatus,
)
from ..store import RowStore
from ..utils.helpers import utcnow
from .notifications import NotificationService

logger = logging.getLogger(__name__)


class PurchasingService:
    def __init__(self, store: RowStore, clock: Callable = utcnow):
        self.clock = clock
        self.purchases = PurchaseRepository(store)
        self.inventory = InventoryRepository(store)
        self.movements = InventoryMovementRepository(store)
        self.production_orders = ProductionOrderRepository(store)
        self.notifier = NotificationService(store)

    def create_purchase(self, payload: PurchaseCreate, production_order_id: Optional[str] = None) -> Purchase:
        """创建采购申请"""
        if not payload.material_name.strip():
            raise ValidationError("Material name is required")
        return self.purchases.insert(
            production_order_id=production_order_id,
            material_name=payload.material_name.strip(),
            quantity=payload.quantity,
            unit=payload.unit,
            unit_cost=payload.unit_cost,
            total_cost=payload.quantity * payload.unit_cost,
            status=PurchaseStatus.REQUESTED,
            requested_at=self.clock(),
            notes=payload.notes,
        )

    def request_material(self, production_order_id: str, payload: PurchaseCreate) -> Purchase:
        """为生产订单申请物料"""
        order = self.production_orders.get(production_order_id)
        purchase = self.create_purchase(payload, production_order_id=order.id)
        self.notifier.notify(
            NotificationType.ORDER_CREATED,
            "Material requested",
            f"Material {purchase.material_name} requested for order {order.order_number}",
            reference_type="production_order",
            reference_id=order.id,
        )
        return purchase

    def list_purchases(self, status: Optional[PurchaseStatus] = None) -> List[Purchase]:
        purchases = self.purchases.newest_first()
        if status is not None:
            purchases = [p for p in purchases if p.status == status]
        return purchases

    def order_purchase(self, purchase_id: str, payload: PurchaseOrder) -> Purchase:
        """向供应商下单，按报价重新计算总价"""
        if not payload.supplier or not payload.supplier.strip():
            raise ValidationError("Supplier is required")
        purchase = self.purchases.get(purchase_id)
        if purchase.status == PurchaseStatus.RECEIVED:
            raise InvalidTransition(f"Purchase {purchase.id} was already received")
        purchase = self.purchases.update_fields(
            purchase.id,
            status=PurchaseStatus.ORDERED,
            supplier=payload.supplier.strip(),
            unit_cost=payload.unit_cost,
            total_cost=payload.unit_cost * purchase.quantity,
            notes=payload.notes,
        )
        self.notifier.notify(
            NotificationType.ORDER_CREATED,
            "Purchase ordered",
            f"Material {purchase.material_name} ordered from {purchase.supplier}",
            reference_type="purchase",
            reference_id=purchase.id,
        )
        return purchase

    def receive_purchase(self, purchase_id: str) -> Purchase:
        """收货入库"""
        purchase = self.purchases.get(purchase_id)
        if purchase.status == PurchaseStatus.RECEIVED:
            raise InvalidTransition(f"Purchase {purchase.id} was already received")

        now = self.clock()
        purchase = self.purchases.update_fields(purchase.id, status=PurchaseStatus.RECEIVED, received_at=now)

        item = self.inventory.by_material(purchase.material_name)
        if item is not None:
            item = self.inventory.update_fields(
                item.id,
                quantity=item.quantity + purchase.quantity,
                last_updated=now,
            )
        else:
            item = self.inventory.insert(
                material_name=purchase.material_name,
                quantity=purchase.quantity,
                unit=purchase.unit,
                unit_cost=purchase.unit_cost,
                minimum_stock=0,
                last_updated=now,
            )
        self.movements.insert(
            inventory_id=item.id,
            movement_type=MovementType.IN,
            quantity=purchase.quantity,
            reference_type="purchase",
            reference_id=purchase.id,
        )
        self.notifier.notify(
            NotificationType.PROCESS_COMPLETED,
            "Material received",
            f"Material {purchase.material_name} received and added to inventory",
            reference_type="purchase",
            reference_id=purchase.id,
        )
        logger.info("purchase %s received, %s stock now %s", purchase.id, item.material_name, item.quantity)
        return purchase

    # 库存
    def add_inventory_item(self, payload: InventoryCreate) -> Inventory:
        if not payload.material_name.strip():
            raise ValidationError("Material name is required")
        return self.inventory.insert(**payload.model_dump(), last_updated=self.clock())

    def list_inventory(self) -> List[Inventory]:
        return self.inventory.list_all(order_by="material_name")

    def low_stock_items(self) -> List[Inventory]:
        """库存低于最低库存的物料"""
        return [i for i in self.inventory.list_all() if i.quantity < i.minimum_stock]

    def movements_for(self, inventory_id: str) -> List[InventoryMovement]:
        return self.movements.for_inventory(inventory_id)
