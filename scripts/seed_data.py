import argparse

from sqlalchemy import delete, select

from stockroom.core.logging import setup_logging
from stockroom.database import engine, init_db, session_scope
from stockroom.models import ActivityLog, Category, InventoryItem, StockTransaction, User
from stockroom.repositories.users import create_user
from stockroom.schemas.item import InventoryItemCreate
from stockroom.services.stock_service import create_item_with_stock


def parse_args():
    parser = argparse.ArgumentParser(description="Seed sample inventory data.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing data before seeding.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()

    init_db(engine)

    with session_scope() as db:
        if args.reset:
            db.execute(delete(ActivityLog))
            db.execute(delete(StockTransaction))
            db.execute(delete(InventoryItem))
            db.execute(delete(Category))
            db.execute(delete(User))
            db.commit()

        has_category = db.execute(select(Category.category_id).limit(1)).first()
        if has_category:
            print("Seed skipped: categories already exist.")
            return

        admin = create_user(
            db,
            "admin",
            email="admin@example.com",
            first_name="Store",
            last_name="Admin",
            role="admin",
        )

        categories = [
            Category(category_name="Laboratory Equipment", description="Glassware and instruments"),
            Category(category_name="Field Supplies", description="Seeds, fertiliser and tools"),
        ]
        db.add_all(categories)
        db.commit()

        items = [
            InventoryItemCreate(
                item_name="Microscope Slides (box of 50)",
                category_id=categories[0].category_id,
                quantity=40,
                price=12.5,
                location="Lab Store A",
            ),
            InventoryItemCreate(
                item_name="pH Meter",
                category_id=categories[0].category_id,
                quantity=3,
                price=189.0,
                reorder_level=5,
                location="Lab Store A",
            ),
            InventoryItemCreate(
                item_name="Maize Seed 25kg",
                category_id=categories[1].category_id,
                quantity=120,
                price=42.0,
                location="Barn 2",
            ),
        ]
        for payload in items:
            create_item_with_stock(db, payload, user_id=admin.user_id)

        print("Seed data created.")


if __name__ == "__main__":
    main()
