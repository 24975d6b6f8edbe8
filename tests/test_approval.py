from datetime import timedelta

import pytest

from shopfloor import schemas
from shopfloor.core import ProposalApprovalService, QualityService, SingleFlight
from shopfloor.crud import (
    NotificationRepository,
    ProductionOrderRepository,
    ProductionProcessRepository,
    ProposalRepository,
    QualityInspectionRepository,
    SalesOrderRepository,
)
from shopfloor.database.connection import SessionLocal
from shopfloor.errors import InvalidTransition, NotFound, OperationInProgress, StoreUnavailable
from shopfloor.store import ReadCache, RowStore
from shopfloor.store.sql_backend import SqlBackend


def service(store, clock, guard=None):
    return ProposalApprovalService(store, clock=clock, guard=guard or SingleFlight())


def add_quantity_rule(store, minimum=100):
    QualityService(store).create_criterion(schemas.CriterionSave(name="Large batch", min_quantity=minimum))


def test_approve_single_item_with_inspection(store, clock, make_proposal):
    add_quantity_rule(store)
    proposal, view = make_proposal([(150, {})])

    result = service(store, clock).approve(proposal.id)

    assert result.proposal.status == schemas.ProposalStatus.APPROVED
    assert result.proposal.approved_at == clock()
    assert result.sales_order.status == schemas.SalesOrderStatus.IN_PRODUCTION
    assert len(result.production_orders) == 1
    assert len(result.processes) == 4
    assert len(result.inspections) == 1
    assert len(result.notifications) == 2

    order = result.production_orders[0]
    assert order.order_number.startswith("OP-")
    assert order.status == schemas.ProductionStatus.PENDING
    assert order.priority == schemas.Priority.MEDIUM
    assert order.quantity == 150
    assert order.sales_order_item_id == view.items[0].item.id
    assert order.planned_end - order.planned_start == timedelta(days=14)

    inspection = result.inspections[0]
    assert inspection.production_order_id == order.id
    assert inspection.status == schemas.InspectionStatus.PENDING
    assert inspection.inspection_number.startswith("INSP-")
    assert inspection.trigger_reason == "Automatic criteria met: Large batch"

    types = [n.type for n in result.notifications]
    assert types == [schemas.NotificationType.INSPECTION_REQUIRED, schemas.NotificationType.ORDER_APPROVED]

    # 持久化的状态与返回值一致
    assert SalesOrderRepository(store).get(view.order.id).status == schemas.SalesOrderStatus.IN_PRODUCTION
    assert ProposalRepository(store).get(proposal.id).status == schemas.ProposalStatus.APPROVED
    assert len(NotificationRepository(store).list_all()) == 2


def test_each_item_gets_order_and_four_processes_in_sequence(store, clock, make_proposal):
    proposal, view = make_proposal([(5, {}), (7, {"name": "Bushing"}), (9, {"name": "Flange"})])

    result = service(store, clock).approve(proposal.id)

    assert len(result.production_orders) == 3
    assert [o.quantity for o in result.production_orders] == [5, 7, 9]
    processes = ProductionProcessRepository(store)
    for order in result.production_orders:
        steps = processes.for_order(order.id)
        assert [p.process_type for p in steps] == schemas.PROCESS_SEQUENCE
        assert [p.sequence_order for p in steps] == [1, 2, 3, 4]
        assert all(p.status == schemas.ProcessStatus.PENDING for p in steps)
        assert all(p.estimated_minutes == 60 for p in steps)
    # 没有质检条件：只有一条审批通知
    assert result.inspections == []
    assert [n.type for n in result.notifications] == [schemas.NotificationType.ORDER_APPROVED]


def test_only_matching_items_get_inspections(store, clock, make_proposal):
    QualityService(store).create_criterion(
        schemas.CriterionSave(name="Complex geometry", complexity=schemas.Complexity.COMPLEX)
    )
    proposal, _ = make_proposal([
        (1, {"complexity": schemas.Complexity.SIMPLE}),
        (1, {"complexity": schemas.Complexity.COMPLEX}),
    ])

    result = service(store, clock).approve(proposal.id)

    assert len(result.inspections) == 1
    assert result.inspections[0].production_order_id == result.production_orders[1].id


def test_disabled_criteria_do_not_trigger(store, clock, make_proposal):
    quality = QualityService(store)
    add_quantity_rule(store, minimum=1)
    quality.toggle_criterion(quality.list_criteria()[0].id)
    proposal, _ = make_proposal([(500, {})])

    result = service(store, clock).approve(proposal.id)
    assert result.inspections == []


def test_approving_twice_is_rejected(store, clock, make_proposal):
    proposal, _ = make_proposal()
    approvals = service(store, clock)
    approvals.approve(proposal.id)

    with pytest.raises(InvalidTransition):
        approvals.approve(proposal.id)
    assert len(ProductionOrderRepository(store).list_all()) == 1


def test_concurrent_approval_of_same_proposal_fails_fast(store, clock, make_proposal):
    proposal, _ = make_proposal()
    guard = SingleFlight()
    approvals = service(store, clock, guard)

    with guard.claim(proposal.id):
        with pytest.raises(OperationInProgress):
            approvals.approve(proposal.id)
    assert ProductionOrderRepository(store).list_all() == []

    # 释放后可以正常审批
    approvals.approve(proposal.id)
    # 调用结束后 key 已释放，可以再次占用
    with guard.claim(proposal.id):
        pass
    assert len(ProductionOrderRepository(store).list_all()) == 1


def test_approve_requires_quoted_sales_order(store, clock, make_proposal):
    proposal, view = make_proposal()
    SalesOrderRepository(store).update_fields(view.order.id, status=schemas.SalesOrderStatus.CANCELLED)

    with pytest.raises(InvalidTransition):
        service(store, clock).approve(proposal.id)
    assert ProposalRepository(store).get(proposal.id).status == schemas.ProposalStatus.PENDING


def test_approve_unknown_proposal(store, clock):
    with pytest.raises(NotFound):
        service(store, clock).approve("missing")


def test_reject_cancels_sales_order(store, clock, make_proposal):
    proposal, view = make_proposal()
    approvals = service(store, clock)

    rejected = approvals.reject(proposal.id)

    assert rejected.status == schemas.ProposalStatus.REJECTED
    assert SalesOrderRepository(store).get(view.order.id).status == schemas.SalesOrderStatus.CANCELLED
    assert ProductionOrderRepository(store).list_all() == []
    assert NotificationRepository(store).list_all() == []

    with pytest.raises(InvalidTransition):
        approvals.approve(proposal.id)
    with pytest.raises(InvalidTransition):
        approvals.reject(proposal.id)


class FailingProcessBackend(SqlBackend):
    """第 N 次写入工序时失败"""

    def __init__(self, session_factory, fail_on):
        super().__init__(session_factory)
        self.fail_on = fail_on
        self.process_writes = 0

    def append_row(self, sheet, row):
        if sheet == "processos_producao":
            self.process_writes += 1
            if self.process_writes == self.fail_on:
                raise StoreUnavailable("sheet write failed")
        super().append_row(sheet, row)


def test_failure_midway_keeps_completed_writes(clock, make_proposal):
    backend = FailingProcessBackend(SessionLocal, fail_on=2)
    flaky = RowStore(backend, cache=ReadCache(5.0), clock=clock)
    # 用正常的 store 准备数据，再用会失败的 store 审批
    proposal, view = make_proposal()

    with pytest.raises(StoreUnavailable):
        service(flaky, clock).approve(proposal.id)

    assert ProposalRepository(flaky).get(proposal.id).status == schemas.ProposalStatus.APPROVED
    assert SalesOrderRepository(flaky).get(view.order.id).status == schemas.SalesOrderStatus.APPROVED
    orders = ProductionOrderRepository(flaky).list_all()
    assert len(orders) == 1
    assert len(ProductionProcessRepository(flaky).for_order(orders[0].id)) == 1
    assert QualityInspectionRepository(flaky).list_all() == []
    assert NotificationRepository(flaky).list_all() == []


def test_blank_and_malformed_criteria_rows_are_skipped(store, clock, make_proposal):
    add_quantity_rule(store)
    # 手工编辑表格留下的空行和坏行，直接写入后端
    store.backend.append_row("criterios_inspecao", {"id": "", "name": "", "enabled": ""})
    store.backend.append_row("criterios_inspecao", {"id": "c-bad", "name": "Broken", "min_quantity": "lots"})
    store.cache.clear()
    proposal, _ = make_proposal([(150, {})])

    result = service(store, clock).approve(proposal.id)

    assert [c.name for c in QualityService(store).list_criteria()] == ["Large batch"]
    assert len(result.inspections) == 1
    assert result.inspections[0].trigger_reason == "Automatic criteria met: Large batch"
    assert result.sales_order.status == schemas.SalesOrderStatus.IN_PRODUCTION
