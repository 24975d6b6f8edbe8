"""采购、库存、供应商API路由"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from ... import schemas
from ...core import PurchasingService, SupplierService
from ...store import RowStore
from ..deps import get_store

router = APIRouter()


@router.post("/purchases/", response_model=schemas.Purchase)
def create_purchase(payload: schemas.PurchaseCreate, store: RowStore = Depends(get_store)):
    """创建直接采购申请"""
    return PurchasingService(store).create_purchase(payload)


@router.get("/purchases/", response_model=List[schemas.Purchase])
def list_purchases(status: Optional[schemas.PurchaseStatus] = None, store: RowStore = Depends(get_store)):
    return PurchasingService(store).list_purchases(status)


@router.post("/purchases/{purchase_id}/order", response_model=schemas.Purchase)
def order_purchase(purchase_id: str, payload: schemas.PurchaseOrder, store: RowStore = Depends(get_store)):
    """向供应商下单"""
    return PurchasingService(store).order_purchase(purchase_id, payload)


@router.post("/purchases/{purchase_id}/receive", response_model=schemas.Purchase)
def receive_purchase(purchase_id: str, store: RowStore = Depends(get_store)):
    """收货并入库"""
    return PurchasingService(store).receive_purchase(purchase_id)


@router.get("/inventory/", response_model=List[schemas.Inventory])
def list_inventory(low_stock: bool = False, store: RowStore = Depends(get_store)):
    service = PurchasingService(store)
    return service.low_stock_items() if low_stock else service.list_inventory()


@router.post("/inventory/", response_model=schemas.Inventory)
def add_inventory_item(payload: schemas.InventoryCreate, store: RowStore = Depends(get_store)):
    return PurchasingService(store).add_inventory_item(payload)


@router.get("/inventory/{inventory_id}/movements", response_model=List[schemas.InventoryMovement])
def list_movements(inventory_id: str, store: RowStore = Depends(get_store)):
    return PurchasingService(store).movements_for(inventory_id)


@router.get("/suppliers/", response_model=List[schemas.Supplier])
def list_suppliers(active_only: bool = False, store: RowStore = Depends(get_store)):
    return SupplierService(store).list_suppliers(active_only)


@router.post("/suppliers/", response_model=schemas.Supplier)
def create_supplier(payload: schemas.SupplierSave, store: RowStore = Depends(get_store)):
    """创建供应商"""
    return SupplierService(store).create_supplier(payload)


@router.put("/suppliers/{supplier_id}", response_model=schemas.Supplier)
def update_supplier(supplier_id: str, payload: schemas.SupplierSave, store: RowStore = Depends(get_store)):
    """更新供应商"""
    return SupplierService(store).update_supplier(supplier_id, payload)


@router.post("/suppliers/{supplier_id}/toggle", response_model=schemas.Supplier)
def toggle_supplier(supplier_id: str, store: RowStore = Depends(get_store)):
    return SupplierService(store).toggle_active(supplier_id)
