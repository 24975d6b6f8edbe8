"""质检单与质检条件管理"""

import logging
from typing import Callable, List, Optional

from ..crud import InspectionCriteriaRepository, QualityInspectionRepository
from ..errors import ValidationError
from ..schemas import (
    CriterionSave,
    InspectionComplete,
    InspectionCriteria,
    InspectionMetrics,
    InspectionResult,
    InspectionStatus,
    NotificationType,
    QualityInspection,
)
from ..store import RowStore
from ..utils.helpers import utcnow
from .notifications import NotificationService

logger = logging.getLogger(__name__)


class QualityService:
    def __init__(self, store: RowStore, clock: Callable = utcnow):
        self.clock = clock
        self.inspections = QualityInspectionRepository(store)
        self.criteria = InspectionCriteriaRepository(store)
        self.notifier = NotificationService(store)

    def list_inspections(self, status: Optional[InspectionStatus] = None) -> List[QualityInspection]:
        inspections = self.inspections.newest_first()
        if status is not None:
            inspections = [i for i in inspections if i.status == status]
        return inspections

    def complete_inspection(self, inspection_id: str, payload: InspectionComplete) -> QualityInspection:
        """记录质检结果：pass 为 approved，其余为 rejected"""
        if not payload.inspector_name or not payload.inspector_name.strip() or payload.result is None:
            raise ValidationError("Inspector name and result are required")
        inspection = self.inspections.get(inspection_id)
        status = InspectionStatus.APPROVED if payload.result == InspectionResult.PASS else InspectionStatus.REJECTED
        inspection = self.inspections.update_fields(
            inspection.id,
            status=status,
            inspector_name=payload.inspector_name.strip(),
            inspection_date=self.clock(),
            result=payload.result,
            notes=payload.notes,
            corrective_actions=payload.corrective_actions,
        )
        outcome = "passed" if payload.result == InspectionResult.PASS else "failed"
        self.notifier.notify(
            NotificationType.PROCESS_COMPLETED,
            "Inspection completed",
            f"Inspection {inspection.inspection_number} - result: {outcome}",
            reference_type="quality_inspection",
            reference_id=inspection.id,
        )
        logger.info("inspection %s %s", inspection.inspection_number, status.value)
        return inspection

    def inspection_metrics(self) -> InspectionMetrics:
        """合格率 = approved / (approved + rejected) * 100"""
        inspections = self.inspections.list_all()
        approved = sum(1 for i in inspections if i.status == InspectionStatus.APPROVED)
        rejected = sum(1 for i in inspections if i.status == InspectionStatus.REJECTED)
        pending = sum(1 for i in inspections if i.status == InspectionStatus.PENDING)
        decided = approved + rejected
        return InspectionMetrics(
            total=len(inspections),
            approved=approved,
            rejected=rejected,
            pending=pending,
            approval_rate=(approved / decided * 100) if decided else 0.0,
        )

    # 质检条件
    def list_criteria(self) -> List[InspectionCriteria]:
        return self.criteria.list_all(order_by="name")

    @staticmethod
    def _criterion_fields(payload: CriterionSave) -> dict:
        if not payload.name or not payload.name.strip():
            raise ValidationError("Criterion name is required")
        fields = payload.model_dump()
        fields["name"] = payload.name.strip()
        # 0 和空字符串都当作未填写
        for key in ("min_quantity", "min_weight", "specific_customer_id", "specific_machine"):
            fields[key] = fields[key] or None
        return fields

    def create_criterion(self, payload: CriterionSave) -> InspectionCriteria:
        return self.criteria.insert(**self._criterion_fields(payload))

    def update_criterion(self, criterion_id: str, payload: CriterionSave) -> InspectionCriteria:
        return self.criteria.update_fields(criterion_id, **self._criterion_fields(payload))

    def toggle_criterion(self, criterion_id: str) -> InspectionCriteria:
        criterion = self.criteria.get(criterion_id)
        return self.criteria.update_fields(criterion.id, enabled=not criterion.enabled)

    def delete_criterion(self, criterion_id: str) -> None:
        self.criteria.delete(criterion_id)
