"""采购与库存数据结构定义"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from .base import SheetRecord
from .enums import MovementType, PurchaseStatus


class Purchase(SheetRecord):
    """采购单"""
    production_order_id: Optional[str] = None
    material_name: str
    quantity: float = 0.0
    unit: str = "kg"
    unit_cost: float = 0.0
    total_cost: float = 0.0
    supplier: Optional[str] = None
    status: PurchaseStatus = PurchaseStatus.REQUESTED
    requested_at: Optional[datetime] = None
    received_at: Optional[datetime] = None
    notes: Optional[str] = None


class Inventory(SheetRecord):
    """库存"""
    material_name: str
    quantity: float = 0.0
    unit: str = "kg"
    unit_cost: float = 0.0
    minimum_stock: float = 0.0
    location: Optional[str] = None
    last_updated: Optional[datetime] = None


class InventoryMovement(SheetRecord):
    """库存流水"""
    inventory_id: str
    movement_type: MovementType
    quantity: float
    reference_type: Optional[str] = None
    reference_id: Optional[str] = None
    notes: Optional[str] = None


class Supplier(SheetRecord):
    """供应商"""
    name: str
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    active: bool = True


class PurchaseCreate(BaseModel):
    """创建采购单时的模型"""
    material_name: str
    quantity: float = 0.0
    unit: str = "kg"
    unit_cost: float = 0.0
    notes: Optional[str] = None


class PurchaseOrder(BaseModel):
    """向供应商下单时的模型"""
    supplier: str
    unit_cost: float
    notes: Optional[str] = None


class InventoryCreate(BaseModel):
    """新增库存物料时的模型"""
    material_name: str
    quantity: float = 0.0
    unit: str = "kg"
    unit_cost: float = 0.0
    minimum_stock: float = 0.0
    location: Optional[str] = None


class SupplierSave(BaseModel):
    """创建/更新供应商时的模型"""
    name: str
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    active: bool = True
