#!/usr/bin/env python3
"""Clear all stores and products from the database."""

from sqlalchemy import delete, func, select

from app.db.session import SessionLocal
from app.models.inventory_models import Product, Store


def main():
    db = SessionLocal()
    try:
        print('\n' + '=' * 80)
        print('CLEARING DATABASE')
        print('=' * 80 + '\n')

        # Counts include soft-deleted rows
        store_count = db.scalar(select(func.count()).select_from(Store))
        product_count = db.scalar(select(func.count()).select_from(Product))

        print(f'Found {store_count} stores')
        print(f'Found {product_count} products')

        if store_count == 0 and product_count == 0:
            print('\n✓ Database is already empty!\n')
            return

        print('\nDeleting all data...')

        # Delete in foreign key order
        deleted = db.execute(delete(Product)).rowcount
        print(f'  ✓ Deleted {deleted} products')

        deleted = db.execute(delete(Store)).rowcount
        print(f'  ✓ Deleted {deleted} stores')

        db.commit()

        print('\n' + '=' * 80)
        print('✓ DATABASE CLEARED SUCCESSFULLY')
        print('=' * 80 + '\n')

    except Exception as e:
        db.rollback()
        print(f'\n✗ Error clearing database: {e}\n')
        raise
    finally:
        db.close()


if __name__ == '__main__':
    main()
