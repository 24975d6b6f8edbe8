#!/usr/bin/env python3
"""Seed inspection criteria, a demo customer/product and optionally a quoted demo order.

This script is runnable directly (python scripts/seed_demo.py) and also import-safe.
If you see `ModuleNotFoundError: No module named 'shopfloor'`, run from the project root or set PYTHONPATH=. before running.
"""
import sys
from pathlib import Path

# Ensure project root is on sys.path when running the script directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from shopfloor import models, schemas  # noqa: F401
from shopfloor.config.settings import settings
from shopfloor.core import QualityService, SalesService
from shopfloor.database.connection import Base, engine
from shopfloor.errors import ShopfloorError
from shopfloor.store import ReadCache, RowStore, build_backend


import argparse


def main():
    parser = argparse.ArgumentParser(description='Seed inspection criteria and optionally a demo sales order with a pending proposal.')
    parser.add_argument('--no-criteria', action='store_true', help='Skip seeding inspection criteria')
    parser.add_argument('--demo-order', action='store_true', help='Create a demo customer, product, sales order and proposal')
    parser.add_argument('--quantity', type=float, default=150, help='Quantity of the demo order item')
    args = parser.parse_args()

    if settings.STORE_BACKEND == "sql":
        Base.metadata.create_all(bind=engine)

    store = RowStore(build_backend(settings), cache=ReadCache(settings.CACHE_TTL_SECONDS))
    try:
        # seed default criteria if none exist (unless --no-criteria)
        if not args.no_criteria:
            quality = QualityService(store)
            if quality.list_criteria():
                print("Inspection criteria already seeded")
            else:
                print("Seeding inspection criteria")
                quality.create_criterion(schemas.CriterionSave(name="Large batch", min_quantity=100))
                quality.create_criterion(schemas.CriterionSave(name="Heavy part", min_weight=50))
                quality.create_criterion(schemas.CriterionSave(name="Complex geometry", complexity=schemas.Complexity.COMPLEX))
                print("Done seeding criteria")

        if args.demo_order:
            sales = SalesService(store)
            customer = sales.create_customer(schemas.CustomerCreate(name="Demo Metalworks", company="Demo Metalworks Ltd"))
            product = sales.create_product(schemas.ProductCreate(
                name="Flanged shaft", material="SAE 1045", unit_price=85.0,
                estimated_weight=12.5, complexity=schemas.Complexity.MEDIUM,
            ))
            view = sales.create_sales_order(schemas.SalesOrderCreate(
                customer_id=customer.id,
                created_by="seed",
                items=[schemas.SalesOrderItemCreate(product_id=product.id, quantity=args.quantity, unit_price=product.unit_price)],
            ))
            proposal = sales.create_proposal(schemas.ProposalCreate(
                sales_order_id=view.order.id, delivery_days=20, payment_terms="30 days", validity_days=15,
            ))
            print(f"Created order {view.order.order_number} with proposal {proposal.proposal_number} ({proposal.id})")

    except ShopfloorError as exc:
        print('Error while seeding data:', exc)
        sys.exit(1)


if __name__ == '__main__':
    main()
