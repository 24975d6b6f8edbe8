"""销售相关数据结构定义

客户、产品、销售订单、订单明细、报价单
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from .base import SheetRecord
from .enums import Complexity, ProposalStatus, SalesOrderStatus


class Customer(SheetRecord):
    """客户"""
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    address: Optional[str] = None


class Product(SheetRecord):
    """产品"""
    name: str
    drawing_url: Optional[str] = None
    material: Optional[str] = None
    unit_price: float = 0.0
    estimated_weight: Optional[float] = None  # kg
    complexity: Optional[Complexity] = None  # 空单元格表示未设置，不等于 simple
    notes: Optional[str] = None


class SalesOrder(SheetRecord):
    """销售订单"""
    order_number: str
    customer_id: str
    status: SalesOrderStatus = SalesOrderStatus.DRAFT
    created_by: Optional[str] = None
    notes: Optional[str] = None
    updated_at: Optional[datetime] = None


class SalesOrderItem(SheetRecord):
    """销售订单明细，审批后只读"""
    sales_order_id: str
    product_id: str
    quantity: float
    unit_price: float = 0.0
    total_price: float = 0.0
    drawing_url: Optional[str] = None
    special_requirements: Optional[str] = None


class Proposal(SheetRecord):
    """报价单"""
    sales_order_id: str
    proposal_number: str
    subtotal: float = 0.0
    discount: float = 0.0
    total: float = 0.0
    delivery_days: int = 0
    payment_terms: str = ""
    validity_days: int = 0
    terms_conditions: Optional[str] = None
    status: ProposalStatus = ProposalStatus.PENDING
    approved_at: Optional[datetime] = None


# 请求模型
class CustomerCreate(BaseModel):
    """创建客户时的模型"""
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    address: Optional[str] = None


class ProductCreate(BaseModel):
    """创建产品时的模型"""
    name: str
    drawing_url: Optional[str] = None
    material: Optional[str] = None
    unit_price: float = 0.0
    estimated_weight: Optional[float] = None
    complexity: Complexity = Complexity.SIMPLE
    notes: Optional[str] = None


class SalesOrderItemCreate(BaseModel):
    product_id: str
    quantity: float
    unit_price: float
    drawing_url: Optional[str] = None
    special_requirements: Optional[str] = None


class SalesOrderCreate(BaseModel):
    """创建销售订单时的模型"""
    customer_id: str
    created_by: Optional[str] = None
    notes: Optional[str] = None
    items: List[SalesOrderItemCreate] = []


class ProposalCreate(BaseModel):
    """创建报价单时的模型"""
    sales_order_id: str
    discount: float = 0.0
    delivery_days: int = 30
    payment_terms: str = ""
    validity_days: int = 15
    terms_conditions: Optional[str] = None


# 读取模型（客户端关联后的视图）
class SalesOrderItemView(BaseModel):
    item: SalesOrderItem
    product: Optional[Product] = None


class SalesOrderView(BaseModel):
    order: SalesOrder
    customer: Optional[Customer] = None
    items: List[SalesOrderItemView] = []


class ProposalView(BaseModel):
    proposal: Proposal
    sales_order: Optional[SalesOrderView] = None
