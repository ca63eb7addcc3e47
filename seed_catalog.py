"""
Script to load a sample product with sku variants
Runs through the same variant assembly path as POST /api/v1/products
"""
import sys
from catalog.database import SessionLocal, UnitOfWork
from catalog.schemas.product import ProductCreate
from catalog.services.variant_service import create_product_with_variants

SAMPLE_PRODUCT = {
    "name": "Classic Tee",
    "description": "Cotton t-shirt in three colours and two sizes",
    "coverUrl": "https://cdn.example.com/products/classic-tee/cover.jpg",
    "showPrice": 19.9,
    "skus": [
        {
            "price": color_price,
            "stock": 25,
            "attributeValues": [
                {"attributeName": "Color", "value": color},
                {"attributeName": "Size", "value": size},
            ],
        }
        for color, color_price in (("White", 19.9), ("Black", 21.9), ("Navy", 21.9))
        for size in ("M", "L")
    ],
}


def seed_catalog():
    """Create the sample product; returns its id or None on failure"""
    db = SessionLocal()

    try:
        product = create_product_with_variants(UnitOfWork(db), ProductCreate.model_validate(SAMPLE_PRODUCT))

        print(f"[SUCCESS] Created product {product.id}: {product.name}")
        for sku in product.skus:
            labels = ", ".join(f"{v.attribute.name}={v.value}" for v in sku.attribute_values)
            print(f"   sku {sku.id}: {labels} @ {sku.price} ({sku.stock} in stock)")
        return product.id

    except Exception as e:
        print(f"[WARNING] Error seeding catalog: {e}")
        return None
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(0 if seed_catalog() else 1)
