"""质检相关仓储"""

from typing import List

from ..schemas import InspectionCriteria, QualityInspection
from ..store import tables
from .base import Repository


class InspectionCriteriaRepository(Repository[InspectionCriteria]):
    table = tables.INSPECTION_CRITERIA
    record_type = InspectionCriteria

    def enabled(self) -> List[InspectionCriteria]:
        """启用的条件（"true"/true 都视为启用）"""
        return [c for c in self.list_all() if c.enabled]


class QualityInspectionRepository(Repository[QualityInspection]):
    table = tables.QUALITY_INSPECTIONS
    record_type = QualityInspection

    def newest_first(self) -> List[QualityInspection]:
        return self.list_all(order_by="created_at", descending=True)

    def for_order(self, production_order_id: str) -> List[QualityInspection]:
        return self.list_by("production_order_id", production_order_id)
