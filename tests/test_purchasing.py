import pytest

from shopfloor import schemas
from shopfloor.core import NotificationService, ProposalApprovalService, PurchasingService, SingleFlight, SupplierService
from shopfloor.crud import PurchaseRepository
from shopfloor.errors import InvalidTransition, NotFound, ValidationError


@pytest.fixture
def purchasing(store, clock):
    return PurchasingService(store, clock=clock)


def test_create_purchase_computes_total(purchasing):
    purchase = purchasing.create_purchase(schemas.PurchaseCreate(material_name=" SAE 1045 ", quantity=20, unit_cost=3.5))
    assert purchase.material_name == "SAE 1045"
    assert purchase.total_cost == 70.0
    assert purchase.status == schemas.PurchaseStatus.REQUESTED
    assert purchase.production_order_id is None


def test_create_purchase_requires_material(purchasing):
    with pytest.raises(ValidationError):
        purchasing.create_purchase(schemas.PurchaseCreate(material_name="  ", quantity=1))


def test_request_material_for_production_order(store, clock, purchasing, make_proposal):
    proposal, _ = make_proposal()
    order = ProposalApprovalService(store, clock=clock, guard=SingleFlight()).approve(proposal.id).production_orders[0]
    clock.advance(minutes=1)

    purchase = purchasing.request_material(order.id, schemas.PurchaseCreate(material_name="Bar stock", quantity=10))

    assert purchase.production_order_id == order.id
    assert [p.id for p in PurchaseRepository(store).for_order(order.id)] == [purchase.id]
    latest = NotificationService(store).list_notifications(limit=1)[0]
    assert latest.type == schemas.NotificationType.ORDER_CREATED


def test_request_material_for_unknown_order(purchasing):
    with pytest.raises(NotFound):
        purchasing.request_material("missing", schemas.PurchaseCreate(material_name="Bar stock", quantity=1))


def test_order_then_receive_creates_inventory(store, purchasing):
    purchase = purchasing.create_purchase(schemas.PurchaseCreate(material_name="Bar stock", quantity=12, unit="m"))

    ordered = purchasing.order_purchase(purchase.id, schemas.PurchaseOrder(supplier="Steel Co", unit_cost=4.0))
    assert ordered.status == schemas.PurchaseStatus.ORDERED
    assert ordered.supplier == "Steel Co"
    assert ordered.total_cost == 48.0

    received = purchasing.receive_purchase(purchase.id)
    assert received.status == schemas.PurchaseStatus.RECEIVED
    assert received.received_at is not None

    items = purchasing.list_inventory()
    assert len(items) == 1
    assert items[0].material_name == "Bar stock"
    assert items[0].quantity == 12
    assert items[0].unit == "m"
    assert items[0].minimum_stock == 0

    movements = purchasing.movements_for(items[0].id)
    assert len(movements) == 1
    assert movements[0].movement_type == schemas.MovementType.IN
    assert movements[0].reference_id == purchase.id


def test_receive_adds_to_existing_stock(purchasing):
    item = purchasing.add_inventory_item(schemas.InventoryCreate(material_name="Bar stock", quantity=5, minimum_stock=10))
    purchase = purchasing.create_purchase(schemas.PurchaseCreate(material_name="Bar stock", quantity=7))

    purchasing.receive_purchase(purchase.id)

    items = purchasing.list_inventory()
    assert len(items) == 1
    assert items[0].id == item.id
    assert items[0].quantity == 12


def test_receive_matches_material_name_exactly(purchasing):
    purchasing.add_inventory_item(schemas.InventoryCreate(material_name="Steel", quantity=5))
    purchase = purchasing.create_purchase(schemas.PurchaseCreate(material_name="STEEL", quantity=3))

    purchasing.receive_purchase(purchase.id)

    stock = {i.material_name: i.quantity for i in purchasing.list_inventory()}
    assert stock == {"STEEL": 3, "Steel": 5}


def test_receive_twice_is_rejected(purchasing):
    purchase = purchasing.create_purchase(schemas.PurchaseCreate(material_name="Bar stock", quantity=1))
    purchasing.receive_purchase(purchase.id)
    with pytest.raises(InvalidTransition):
        purchasing.receive_purchase(purchase.id)
    with pytest.raises(InvalidTransition):
        purchasing.order_purchase(purchase.id, schemas.PurchaseOrder(supplier="Steel Co", unit_cost=1))


def test_order_requires_supplier(purchasing):
    purchase = purchasing.create_purchase(schemas.PurchaseCreate(material_name="Bar stock", quantity=1))
    with pytest.raises(ValidationError):
        purchasing.order_purchase(purchase.id, schemas.PurchaseOrder(supplier=" ", unit_cost=1))


def test_list_purchases_by_status(clock, purchasing):
    first = purchasing.create_purchase(schemas.PurchaseCreate(material_name="A", quantity=1))
    clock.advance(minutes=1)
    second = purchasing.create_purchase(schemas.PurchaseCreate(material_name="B", quantity=1))
    purchasing.receive_purchase(first.id)

    assert [p.id for p in purchasing.list_purchases()] == [second.id, first.id]
    assert [p.id for p in purchasing.list_purchases(schemas.PurchaseStatus.REQUESTED)] == [second.id]


def test_low_stock_items(purchasing):
    purchasing.add_inventory_item(schemas.InventoryCreate(material_name="A", quantity=2, minimum_stock=5))
    purchasing.add_inventory_item(schemas.InventoryCreate(material_name="B", quantity=5, minimum_stock=5))
    assert [i.material_name for i in purchasing.low_stock_items()] == ["A"]


def test_suppliers_toggle_and_filter(store):
    suppliers = SupplierService(store)
    steel = suppliers.create_supplier(schemas.SupplierSave(name="Steel Co"))
    suppliers.create_supplier(schemas.SupplierSave(name="Alu Ltd"))

    assert [s.name for s in suppliers.list_suppliers()] == ["Alu Ltd", "Steel Co"]
    suppliers.toggle_active(steel.id)
    assert [s.name for s in suppliers.list_suppliers(active_only=True)] == ["Alu Ltd"]

    updated = suppliers.update_supplier(steel.id, schemas.SupplierSave(name="Steel Co", phone="555", active=False))
    assert updated.phone == "555"
    with pytest.raises(ValidationError):
        suppliers.create_supplier(schemas.SupplierSave(name=""))
