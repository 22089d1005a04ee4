"""
Built-in product table.

Last entry in the catalog source chain, used when neither the inventory
API nor any CSV export can be read. Must never be empty.

Edit FALLBACK_PRODUCTS to change what the till shows when offline.
"""

from typing import List

from models.product import Product, product_image_path


SACK_UNIT = "55Kg / 1 Karung"

FALLBACK_PRODUCTS = (
    # (id, name, price, category, unit, stock)
    ("semen-padang", "Semen Padang", 165000, "semen", SACK_UNIT, 50),
    ("semen-tiga-roda", "Semen Tiga Roda", 135000, "semen", SACK_UNIT, 30),
    ("semen-baturaja", "Semen Baturaja", 115000, "semen", SACK_UNIT, 25),
    ("semen-rajawali", "Semen Rajawali", 105000, "semen", SACK_UNIT, 40),
    ("semen-gresik", "Semen Gresik", 125000, "semen", SACK_UNIT, 35),
    ("semen-holcim", "Semen Holcim", 145000, "semen", SACK_UNIT, 20),
    ("semen-indocement", "Semen Indocement", 155000, "semen", SACK_UNIT, 15),
    ("batu-bata-merah", "Batu Bata Merah", 2500, "batu-bata", "1 Pcs", 1000),
    ("genteng-beton", "Genteng Beton", 15000, "genteng", "1 Pcs", 200),
    ("pintu-kayu", "Pintu Kayu", 450000, "pintu", "1 Unit", 10),
)


def get_fallback_products() -> List[Product]:
    """
    Return the built-in product list.

    A new list is built on each call so callers may keep or slice it freely.
    """
    return [
        Product(
            id=product_id,
            name=name,
            price=price,
            category=category,
            unit=unit,
            stock=stock,
            image=product_image_path(product_id),
        )
        for product_id, name, price, category, unit, stock in FALLBACK_PRODUCTS
    ]
