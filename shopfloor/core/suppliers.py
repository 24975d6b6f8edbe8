"""供应商管理"""

from typing import List

from ..crud import SupplierRepository
from ..errors import ValidationError
from ..schemas import Supplier, SupplierSave
from ..store import RowStore


class SupplierService:
    def __init__(self, store: RowStore):
        self.suppliers = SupplierRepository(store)

    @staticmethod
    def _fields(payload: SupplierSave) -> dict:
        if not payload.name or not payload.name.strip():
            raise ValidationError("Supplier name is required")
        fields = payload.model_dump()
        fields["name"] = payload.name.strip()
        return fields

    def list_suppliers(self, active_only: bool = False) -> List[Supplier]:
        suppliers = self.suppliers.list_all(order_by="name")
        if active_only:
            suppliers = [s for s in suppliers if s.active]
        return suppliers

    def create_supplier(self, payload: SupplierSave) -> Supplier:
        return self.suppliers.insert(**self._fields(payload))

    def update_supplier(self, supplier_id: str, payload: SupplierSave) -> Supplier:
        return self.suppliers.update_fields(supplier_id, **self._fields(payload))

    def toggle_active(self, supplier_id: str) -> Supplier:
        supplier = self.suppliers.get(supplier_id)
        return self.suppliers.update_fields(supplier.id, active=not supplier.active)
