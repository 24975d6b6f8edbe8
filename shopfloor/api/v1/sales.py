"""销售API路由

客户、产品、销售订单
"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from ... import schemas
from ...core import SalesService
from ...store import RowStore
from ..deps import get_store

router = APIRouter()


@router.post("/customers/", response_model=schemas.Customer)
def create_customer(payload: schemas.CustomerCreate, store: RowStore = Depends(get_store)):
    """创建客户"""
    return SalesService(store).create_customer(payload)


@router.get("/customers/", response_model=List[schemas.Customer])
def list_customers(store: RowStore = Depends(get_store)):
    return SalesService(store).list_customers()


@router.post("/products/", response_model=schemas.Product)
def create_product(payload: schemas.ProductCreate, store: RowStore = Depends(get_store)):
    """创建产品"""
    return SalesService(store).create_product(payload)


@router.get("/products/", response_model=List[schemas.Product])
def list_products(store: RowStore = Depends(get_store)):
    return SalesService(store).list_products()


@router.post("/sales-orders/", response_model=schemas.SalesOrderView)
def create_sales_order(payload: schemas.SalesOrderCreate, store: RowStore = Depends(get_store)):
    """创建销售订单（草稿）及明细"""
    return SalesService(store).create_sales_order(payload)


@router.get("/sales-orders/", response_model=List[schemas.SalesOrderView])
def list_sales_orders(status: Optional[schemas.SalesOrderStatus] = None, store: RowStore = Depends(get_store)):
    """获取销售订单列表，按创建时间倒序"""
    return SalesService(store).list_sales_orders(status)


@router.get("/sales-orders/{sales_order_id}", response_model=schemas.SalesOrderView)
def get_sales_order(sales_order_id: str, store: RowStore = Depends(get_store)):
    return SalesService(store).get_sales_order(sales_order_id)


@router.delete("/sales-orders/{sales_order_id}")
def delete_sales_order(sales_order_id: str, store: RowStore = Depends(get_store)):
    """删除指定ID的销售订单"""
    SalesService(store).delete_sales_order(sales_order_id)
    return {"message": "Sales order deleted successfully"}
