import pytest

from shopfloor.errors import NotFound
from shopfloor.store import ReadCache, RowStore
from shopfloor.store.backends import RowBackend


class MemoryBackend(RowBackend):
    """内存后端，记录读取次数"""

    def __init__(self):
        self.sheets = {}
        self.reads = 0

    def read_rows(self, sheet):
        self.reads += 1
        return [dict(r) for r in self.sheets.get(sheet, [])]

    def append_row(self, sheet, row):
        self.sheets.setdefault(sheet, []).append(dict(row))

    def update_row(self, sheet, index, row):
        self.sheets[sheet][index] = dict(row)

    def delete_row(self, sheet, index):
        del self.sheets[sheet][index]


class Ticker:
    def __init__(self):
        self.value = 0.0

    def __call__(self):
        return self.value


def test_append_assigns_id_and_created_at(store, clock):
    row = store.append("customers", {"name": "Acme", "email": None})
    assert row["id"]
    assert row["created_at"] == "2025-01-06T08:00:00.000Z"
    # None 写成空单元格
    assert row["email"] == ""

    rows = store.fetch_all("customers")
    assert len(rows) == 1
    assert rows[0]["name"] == "Acme"
    assert rows[0]["id"] == row["id"]


def test_append_keeps_given_id():
    store = RowStore(MemoryBackend())
    row = store.append("products", {"id": "p-1", "name": "Shaft", "unit_price": 12.0})
    assert row["id"] == "p-1"
    assert row["unit_price"] == "12"


def test_fetch_all_of_empty_table_returns_empty_list(store):
    assert store.fetch_all("suppliers") == []


def test_update_merges_and_stamps_updated_at(store, clock):
    row = store.append("customers", {"name": "Acme", "phone": "123"})
    clock.advance(minutes=5)
    updated = store.update("customers", row["id"], {"phone": "456"})
    assert updated["name"] == "Acme"
    assert updated["phone"] == "456"
    assert updated["updated_at"] == "2025-01-06T08:05:00.000Z"
    assert store.fetch_all("customers")[0]["phone"] == "456"


def test_update_missing_record_raises_not_found(store):
    store.append("customers", {"name": "Acme"})
    with pytest.raises(NotFound) as exc:
        store.update("customers", "nope", {"name": "x"})
    assert "Record with id nope not found in customers" in str(exc.value)


def test_delete_removes_row_and_missing_raises(store):
    first = store.append("customers", {"name": "A"})
    second = store.append("customers", {"name": "B"})
    store.delete("customers", first["id"])
    assert [r["id"] for r in store.fetch_all("customers")] == [second["id"]]
    with pytest.raises(NotFound):
        store.delete("customers", first["id"])


def test_fetch_all_returns_copies():
    store = RowStore(MemoryBackend())
    store.append("customers", {"name": "A"})
    rows = store.fetch_all("customers")
    rows[0]["name"] = "changed"
    assert store.fetch_all("customers")[0]["name"] == "A"


def test_reads_are_cached_until_ttl_expires():
    backend = MemoryBackend()
    ticker = Ticker()
    store = RowStore(backend, cache=ReadCache(5.0, clock=ticker))
    store.fetch_all("customers")
    store.fetch_all("customers")
    assert backend.reads == 1

    ticker.value = 5.0
    store.fetch_all("customers")
    assert backend.reads == 2


def test_writes_invalidate_cached_sheet():
    backend = MemoryBackend()
    store = RowStore(backend, cache=ReadCache(60.0))
    assert store.fetch_all("customers") == []
    store.append("customers", {"name": "A"})
    # 写入后立即可见，不等缓存过期
    assert len(store.fetch_all("customers")) == 1


def test_logical_table_maps_to_sheet_name():
    backend = MemoryBackend()
    store = RowStore(backend)
    store.append("sales_orders", {"order_number": "PV-1"})
    assert list(backend.sheets) == ["pedidos_venda"]
