import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
import pytest

# Ensure project root is on sys.path so tests can import 'shopfloor' package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# 测试使用独立的 sqlite 文件，必须在导入 shopfloor 之前设置
os.environ["DATABASE_URL"] = "sqlite:///" + str(ROOT / "test_shopfloor.db")
os.environ["STORE_BACKEND"] = "sql"

from shopfloor.database.connection import Base, SessionLocal, engine
from shopfloor.store import ReadCache, RowStore
from shopfloor.store.sql_backend import SqlBackend


@pytest.fixture(autouse=True)
def reset_db():
    # Drop all and re-create so every test starts from empty sheets
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


class FakeClock:
    """可控的时钟，advance() 手动前进"""

    def __init__(self, start=None):
        self.now = start or datetime(2025, 1, 6, 8, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return RowStore(SqlBackend(SessionLocal), cache=ReadCache(5.0), clock=clock)


@pytest.fixture
def make_proposal(store, clock):
    """创建客户、产品、销售订单和待审批报价，返回 (proposal, order_view)

    items 为 (quantity, product kwargs) 列表。
    """
    from shopfloor import schemas
    from shopfloor.core import SalesService

    def _make(items=((150, {}),)):
        sales = SalesService(store, clock=clock)
        customer = sales.create_customer(schemas.CustomerCreate(name="Acme Tooling"))
        lines = []
        for quantity, product_kwargs in items:
            product_kwargs = dict(product_kwargs)
            product_kwargs.setdefault("name", "Shaft")
            product_kwargs.setdefault("unit_price", 10.0)
            product = sales.create_product(schemas.ProductCreate(**product_kwargs))
            lines.append(schemas.SalesOrderItemCreate(product_id=product.id, quantity=quantity, unit_price=product.unit_price))
        view = sales.create_sales_order(schemas.SalesOrderCreate(customer_id=customer.id, items=lines))
        proposal = sales.create_proposal(schemas.ProposalCreate(sales_order_id=view.order.id))
        return proposal, view

    return _make
