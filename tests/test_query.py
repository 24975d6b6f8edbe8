from shopfloor.utils.helpers import loose_equals


def seed_processes(store):
    store.append("production_processes", {"production_order_id": "po-1", "process_type": "milling", "sequence_order": 2})
    store.append("production_processes", {"production_order_id": "po-2", "process_type": "turning", "sequence_order": 1})
    store.append("production_processes", {"production_order_id": "po-1", "process_type": "turning", "sequence_order": 1})
    store.append("production_processes", {"production_order_id": "po-1", "process_type": "grinding", "sequence_order": 10})


def test_filter_and_order_by_numeric_field(store):
    seed_processes(store)
    rows = store.table("production_processes").filter("production_order_id", "po-1").order_by("sequence_order").all()
    # 数字比较：10 排在 2 后面
    assert [r["process_type"] for r in rows] == ["turning", "milling", "grinding"]


def test_filter_uses_loose_equality(store):
    seed_processes(store)
    assert len(store.table("production_processes").filter("sequence_order", 1).all()) == 2
    assert len(store.table("production_processes").filter("sequence_order", "1").all()) == 2
    assert len(store.table("production_processes").filter("sequence_order", 1.0).all()) == 2


def test_multiple_filters_are_combined(store):
    seed_processes(store)
    rows = store.table("production_processes").filter("production_order_id", "po-1").filter("sequence_order", 1).all()
    assert len(rows) == 1
    assert rows[0]["process_type"] == "turning"


def test_order_by_is_stable_for_equal_keys(store):
    for name in ["a", "b", "c"]:
        store.append("inventory", {"material_name": name, "location": "rack"})
    rows = store.table("inventory").order_by("location").all()
    assert [r["material_name"] for r in rows] == ["a", "b", "c"]
    rows = store.table("inventory").order_by("location", descending=True).all()
    assert [r["material_name"] for r in rows] == ["a", "b", "c"]


def test_descending_with_limit(store):
    seed_processes(store)
    rows = store.table("production_processes").order_by("sequence_order", descending=True).limit(2).all()
    assert [r["sequence_order"] for r in rows] == ["10", "2"]


def test_first_returns_none_when_nothing_matches(store):
    seed_processes(store)
    assert store.table("production_processes").filter("production_order_id", "missing").first() is None
    first = store.table("production_processes").filter("production_order_id", "po-2").first()
    assert first["process_type"] == "turning"


def test_empty_values_sort_last(store):
    store.append("inventory", {"material_name": "x", "minimum_stock": ""})
    store.append("inventory", {"material_name": "y", "minimum_stock": 5})
    rows = store.table("inventory").order_by("minimum_stock").all()
    assert [r["material_name"] for r in rows] == ["y", "x"]


def test_loose_equals():
    assert loose_equals(150, "150")
    assert loose_equals("150.0", 150)
    assert loose_equals(True, "true")
    assert loose_equals(None, "")
    assert not loose_equals("abc", "abd")


def test_text_comparison_is_exact():
    # 两边都是字符串时不做数字转换，也不忽略大小写
    assert not loose_equals("Steel", "STEEL")
    assert not loose_equals("007", "7")
    assert not loose_equals(True, "TRUE")
    assert not loose_equals(150, "inf")
    assert not loose_equals(1, "nan")


def test_filter_by_id_is_case_sensitive(store):
    row = store.append("customers", {"id": "abc-1", "name": "Acme"})
    assert store.table("customers").filter("id", "ABC-1").first() is None
    assert store.table("customers").filter("id", row["id"]).first()["name"] == "Acme"
