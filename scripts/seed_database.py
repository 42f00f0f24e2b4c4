#!/usr/bin/env python3
"""Reset the database and load a demo catalog of stores and products."""

from decimal import Decimal

from sqlalchemy import delete, func, select

from app.db.session import session_scope
from app.models.inventory_models import Product, Store

SEED_STORES: list[tuple[str, str, list[tuple[str, str, str, int]]]] = [
    (
        "Downtown Electronics",
        "123 Main St, City Center",
        [
            ("iPhone 15 Pro", "Smartphones", "999.99", 25),
            ("Samsung Galaxy S24", "Smartphones", "899.99", 20),
            ("iPad Air", "Tablets", "599.99", 15),
            ("MacBook Air M3", "Laptops", "1299.99", 10),
            ("AirPods Pro", "Audio", "249.99", 40),
            ("Apple Watch Ultra", "Wearables", "799.99", 8),
            ("Magic Keyboard", "Accessories", "99.99", 30),
            ("USB-C Cable", "Accessories", "19.99", 100),
            ("iPhone 14", "Smartphones", "699.99", 18),
            ("iPad Pro 12.9", "Tablets", "1099.99", 6),
            ("HomePod mini", "Audio", "99.99", 22),
            ("MagSafe Charger", "Accessories", "39.99", 45),
        ],
    ),
    (
        "Tech Haven",
        "456 Tech Park, Innovation District",
        [
            ("Dell XPS 13", "Laptops", "1199.99", 8),
            ("Sony WH-1000XM5", "Audio", "399.99", 30),
            ("Logitech MX Master 3", "Accessories", "99.99", 50),
            ("Samsung 4K Monitor", "Monitors", "599.99", 12),
            ("HP Spectre x360", "Laptops", "1399.99", 5),
            ("Bose QuietComfort 45", "Audio", "329.99", 25),
            ("Mechanical Keyboard RGB", "Accessories", "149.99", 35),
            ("LG UltraWide Monitor", "Monitors", "799.99", 7),
            ("Lenovo ThinkPad X1", "Laptops", "1599.99", 4),
            ("JBL Flip 6", "Audio", "129.99", 40),
            ("Webcam HD Pro", "Accessories", "89.99", 28),
            ("ASUS ROG Monitor", "Monitors", "699.99", 9),
        ],
    ),
    (
        "Gadget World",
        "789 Shopping Mall, West Side",
        [
            ("Nintendo Switch OLED", "Gaming", "349.99", 20),
            ("PlayStation 5", "Gaming", "499.99", 5),
            ("Xbox Series X", "Gaming", "499.99", 7),
            ("Apple Watch Series 9", "Wearables", "399.99", 18),
            ("Meta Quest 3", "Gaming", "499.99", 12),
            ("Steam Deck", "Gaming", "399.99", 8),
            ("Fitbit Charge 6", "Wearables", "159.99", 35),
            ("Garmin Forerunner", "Wearables", "299.99", 14),
            ("Razer DeathAdder Mouse", "Gaming", "69.99", 45),
            ("Samsung Galaxy Watch 6", "Wearables", "349.99", 16),
            ("Gaming Headset Pro", "Gaming", "149.99", 28),
            ("RGB Gaming Chair", "Gaming", "299.99", 6),
        ],
    ),
    (
        "Digital Paradise",
        "321 Silicon Valley, Tech District",
        [
            ("Google Pixel 8 Pro", "Smartphones", "899.99", 15),
            ("OnePlus 11", "Smartphones", "699.99", 22),
            ("Microsoft Surface Pro 9", "Tablets", "999.99", 10),
            ("Kindle Paperwhite", "Tablets", "139.99", 50),
            ("Beats Studio Pro", "Audio", "349.99", 18),
            ("Anker Power Bank", "Accessories", "49.99", 75),
            ("Ring Video Doorbell", "Smart Home", "99.99", 32),
            ("Nest Thermostat", "Smart Home", "129.99", 24),
            ("Philips Hue Starter Kit", "Smart Home", "199.99", 20),
            ("Echo Dot 5th Gen", "Smart Home", "49.99", 60),
            ("Wyze Cam v3", "Smart Home", "35.99", 45),
            ("Google Nest Hub", "Smart Home", "89.99", 28),
        ],
    ),
    (
        "Smart Devices Hub",
        "555 Innovation Ave, Business Park",
        [
            ("Asus ZenBook 14", "Laptops", "899.99", 12),
            ("Acer Predator Monitor", "Monitors", "549.99", 8),
            ("Corsair Gaming Keyboard", "Accessories", "129.99", 25),
            ("SteelSeries Mouse", "Accessories", "79.99", 30),
            ("Canon EOS R50", "Cameras", "899.99", 7),
            ("GoPro Hero 12", "Cameras", "399.99", 15),
            ("DJI Mini 3 Pro", "Cameras", "759.99", 5),
            ("Sony Alpha A6400", "Cameras", "899.99", 6),
            ("Blue Yeti Microphone", "Audio", "99.99", 40),
            ("Elgato Stream Deck", "Accessories", "149.99", 18),
            ("Samsung T7 SSD 1TB", "Accessories", "129.99", 35),
            ("Seagate External HDD 4TB", "Accessories", "99.99", 42),
        ],
    ),
]


def main():
    print('\n' + '=' * 80)
    print('SEEDING DATABASE')
    print('=' * 80 + '\n')

    with session_scope() as db:
        # Products first; the API never hard-deletes so cascade is not relied on here
        deleted_products = db.execute(delete(Product)).rowcount
        deleted_stores = db.execute(delete(Store)).rowcount
        print(f'Cleared {deleted_products} products and {deleted_stores} stores')

        for name, location, products in SEED_STORES:
            store = Store(name=name, location=location)
            db.add(store)
            db.flush()
            for product_name, category, price, quantity in products:
                db.add(
                    Product(
                        store_id=store.id,
                        name=product_name,
                        category=category,
                        price=Decimal(price),
                        quantity=quantity,
                    )
                )
            print(f'  ✓ {name}: {len(products)} products')

        db.flush()
        store_count = db.scalar(select(func.count()).select_from(Store))
        product_count = db.scalar(select(func.count()).select_from(Product))

    print('\n' + '=' * 80)
    print(f'✓ SEEDED {store_count} STORES AND {product_count} PRODUCTS')
    print('=' * 80 + '\n')


if __name__ == '__main__':
    main()
