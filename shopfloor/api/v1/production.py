"""生产API路由

生产订单和工序操作
"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from ... import schemas
from ...core import ProductionLifecycleService, PurchasingService
from ...crud import ProductionOrderRepository, PurchaseRepository
from ...store import RowStore
from ..deps import get_store

router = APIRouter()


@router.get("/production-orders/", response_model=List[schemas.ProductionOrder])
def list_production_orders(status: Optional[schemas.ProductionStatus] = None, store: RowStore = Depends(get_store)):
    """获取生产订单列表，按创建时间倒序"""
    orders = ProductionOrderRepository(store).newest_first()
    if status is not None:
        orders = [o for o in orders if o.status == status]
    return orders


@router.get("/production-orders/{order_id}", response_model=schemas.ProductionOrderDetail)
def get_production_order(order_id: str, store: RowStore = Depends(get_store)):
    """生产订单详情（工序、进度、质检单）"""
    return ProductionLifecycleService(store).detail(order_id)


@router.get("/production-orders/{order_id}/materials", response_model=List[schemas.Purchase])
def list_order_materials(order_id: str, store: RowStore = Depends(get_store)):
    return PurchaseRepository(store).for_order(order_id)


@router.post("/production-orders/{order_id}/materials", response_model=schemas.Purchase)
def request_material(order_id: str, payload: schemas.PurchaseCreate, store: RowStore = Depends(get_store)):
    """为生产订单申请物料"""
    return PurchasingService(store).request_material(order_id, payload)


@router.post("/processes/{process_id}/start", response_model=schemas.ProductionProcess)
def start_process(process_id: str, payload: schemas.ProcessStart, store: RowStore = Depends(get_store)):
    """开始工序，需要操作员"""
    return ProductionLifecycleService(store).start(process_id, payload.operator_name, payload.machine_used)


@router.post("/processes/{process_id}/complete", response_model=schemas.ProductionProcess)
def complete_process(process_id: str, store: RowStore = Depends(get_store)):
    return ProductionLifecycleService(store).complete(process_id)


@router.post("/processes/{process_id}/pause", response_model=schemas.ProductionProcess)
def pause_process(process_id: str, store: RowStore = Depends(get_store)):
    """暂停工序，生产订单置为 on_hold"""
    return ProductionLifecycleService(store).pause(process_id)
