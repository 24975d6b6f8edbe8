"""质检规则判断

一条条件只要任一已填写的阈值满足即命中（条件内部是 OR），
任一启用的条件命中就需要质检（条件之间也是 OR），宁可多检。

阈值为空或为 0 视为未填写；三个阈值都未填写的条件永远不会命中。
specific_customer_id / specific_machine 目前不参与匹配。
"""

from typing import Iterable, List, Optional

from ..schemas import InspectionCriteria, Product, SalesOrderItem


def criterion_matches(criterion: InspectionCriteria, quantity: float, product: Optional[Product]) -> bool:
    """判断单条条件是否命中"""
    if criterion.min_quantity and quantity >= criterion.min_quantity:
        return True
    if product is None:
        return False
    if criterion.min_weight and product.estimated_weight and product.estimated_weight >= criterion.min_weight:
        return True
    if criterion.complexity and product.complexity == criterion.complexity:
        return True
    return False


def matching_criteria(
    item: SalesOrderItem,
    product: Optional[Product],
    criteria: Iterable[InspectionCriteria],
) -> List[InspectionCriteria]:
    """返回命中的启用条件"""
    return [
        criterion for criterion in criteria
        if criterion.enabled and criterion_matches(criterion, item.quantity, product)
    ]


def should_inspect(
    item: SalesOrderItem,
    product: Optional[Product],
    enabled_criteria: Iterable[InspectionCriteria],
) -> bool:
    """是否需要创建质检单"""
    return bool(matching_criteria(item, product, enabled_criteria))
