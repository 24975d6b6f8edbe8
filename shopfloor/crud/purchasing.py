"""采购、库存、供应商仓储"""

from typing import List, Optional

from ..schemas import Inventory, InventoryMovement, Purchase, Supplier
from ..store import tables
from .base import Repository


class PurchaseRepository(Repository[Purchase]):
    table = tables.PURCHASES
    record_type = Purchase

    def newest_first(self) -> List[Purchase]:
        return self.list_all(order_by="requested_at", descending=True)

    def for_order(self, production_order_id: str) -> List[Purchase]:
        return self.list_by("production_order_id", production_order_id, order_by="requested_at", descending=True)


class InventoryRepository(Repository[Inventory]):
    table = tables.INVENTORY
    record_type = Inventory

    def by_material(self, material_name: str) -> Optional[Inventory]:
        return self.find_one("material_name", material_name)


class InventoryMovementRepository(Repository[InventoryMovement]):
    table = tables.INVENTORY_MOVEMENTS
    record_type = InventoryMovement

    def for_inventory(self, inventory_id: str) -> List[InventoryMovement]:
        return self.list_by("inventory_id", inventory_id, order_by="created_at", descending=True)


class SupplierRepository(Repository[Supplier]):
    table = tables.SUPPLIERS
    record_type = Supplier
