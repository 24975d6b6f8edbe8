"""质检API路由"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from ... import schemas
from ...core import QualityService
from ...store import RowStore
from ..deps import get_store

router = APIRouter()


@router.get("/quality-inspections/", response_model=List[schemas.QualityInspection])
def list_inspections(status: Optional[schemas.InspectionStatus] = None, store: RowStore = Depends(get_store)):
    return QualityService(store).list_inspections(status)


@router.get("/quality-inspections/metrics", response_model=schemas.InspectionMetrics)
def inspection_metrics(store: RowStore = Depends(get_store)):
    """质检统计"""
    return QualityService(store).inspection_metrics()


@router.post("/quality-inspections/{inspection_id}/complete", response_model=schemas.QualityInspection)
def complete_inspection(inspection_id: str, payload: schemas.InspectionComplete, store: RowStore = Depends(get_store)):
    """记录质检结果"""
    return QualityService(store).complete_inspection(inspection_id, payload)


@router.get("/inspection-criteria/", response_model=List[schemas.InspectionCriteria])
def list_criteria(store: RowStore = Depends(get_store)):
    return QualityService(store).list_criteria()


@router.post("/inspection-criteria/", response_model=schemas.InspectionCriteria)
def create_criterion(payload: schemas.CriterionSave, store: RowStore = Depends(get_store)):
    """创建质检条件"""
    return QualityService(store).create_criterion(payload)


@router.put("/inspection-criteria/{criterion_id}", response_model=schemas.InspectionCriteria)
def update_criterion(criterion_id: str, payload: schemas.CriterionSave, store: RowStore = Depends(get_store)):
    """更新质检条件"""
    return QualityService(store).update_criterion(criterion_id, payload)


@router.post("/inspection-criteria/{criterion_id}/toggle", response_model=schemas.InspectionCriteria)
def toggle_criterion(criterion_id: str, store: RowStore = Depends(get_store)):
    """启用/停用质检条件"""
    return QualityService(store).toggle_criterion(criterion_id)


@router.delete("/inspection-criteria/{criterion_id}")
def delete_criterion(criterion_id: str, store: RowStore = Depends(get_store)):
    QualityService(store).delete_criterion(criterion_id)
    return {"message": "Criterion deleted successfully"}
