"""报价API路由"""

from typing import List

from fastapi import APIRouter, Depends

from ... import schemas
from ...core import ProposalApprovalService, SalesService
from ...store import RowStore
from ..deps import get_store

router = APIRouter()


@router.post("/proposals/", response_model=schemas.Proposal)
def create_proposal(payload: schemas.ProposalCreate, store: RowStore = Depends(get_store)):
    """为销售订单创建报价"""
    return SalesService(store).create_proposal(payload)


@router.get("/proposals/", response_model=List[schemas.ProposalView])
def list_proposals(store: RowStore = Depends(get_store)):
    return SalesService(store).list_proposals()


@router.get("/proposals/{proposal_id}", response_model=schemas.ProposalView)
def get_proposal(proposal_id: str, store: RowStore = Depends(get_store)):
    return SalesService(store).get_proposal(proposal_id)


@router.post("/proposals/{proposal_id}/approve", response_model=schemas.ApprovalResult)
def approve_proposal(proposal_id: str, store: RowStore = Depends(get_store)):
    """审批报价，创建生产订单、工序、质检单和通知"""
    return ProposalApprovalService(store).approve(proposal_id)


@router.post("/proposals/{proposal_id}/reject", response_model=schemas.Proposal)
def reject_proposal(proposal_id: str, store: RowStore = Depends(get_store)):
    """驳回报价，销售订单取消"""
    return ProposalApprovalService(store).reject(proposal_id)
