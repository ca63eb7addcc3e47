"""
Variant assembly: a product, its skus and their attribute graph written as
one unit.
"""
from typing import Optional
from sqlalchemy.orm import Session, joinedload
from catalog.database import UnitOfWork
from catalog.models.attribute import AttributeValue
from catalog.models.product import Product
from catalog.models.sku import Sku
from catalog.schemas.product import ProductCreate
from catalog.services.attribute_service import resolve_or_create_attribute
import logging

logger = logging.getLogger(__name__)


def load_product_graph(db: Session, product_id: int) -> Optional[Product]:
    """Read a product back from storage with skus -> attribute values -> attribute loaded."""
    return db.query(Product)\
        .options(
            joinedload(Product.skus)
            .joinedload(Sku.attribute_values)
            .joinedload(AttributeValue.attribute)
        )\
        .populate_existing()\
        .filter(Product.id == product_id)\
        .first()


def create_product_with_variants(uow: UnitOfWork, product_data: ProductCreate) -> Product:
    """
    Create a product with all of its skus, attributes and attribute values.

    Everything happens inside `uow`: if any step fails (an attribute value
    with neither a resolvable id nor a name, a constraint violation, ...)
    nothing from this call is left in the database. Attributes are resolved
    by name within the new product, so skus sharing "Color" share one
    Attribute row.

    Returns the product as re-read after commit, so ids and defaults are the
    stored ones.
    """
    db = uow.session

    with uow:
        product = Product(
            name=product_data.name,
            description=product_data.description,
            cover_url=product_data.cover_url,
            show_price=product_data.show_price,
        )
        db.add(product)
        db.flush()

        for sku_data in product_data.skus:
            sku = Sku(product=product, price=sku_data.price, stock=sku_data.stock)
            db.add(sku)
            db.flush()

            for value_data in sku_data.attribute_values:
                attribute = resolve_or_create_attribute(
                    db,
                    product.id,
                    attribute_id=value_data.attribute_id,
                    attribute_name=value_data.attribute_name,
                )

                attribute_value = AttributeValue(value=value_data.value, attribute=attribute)
                db.add(attribute_value)
                db.flush()

                # Append, never replace: earlier values of this sku stay linked
                sku.attribute_values.append(attribute_value)

            # Persist the sku's links once all its values are attached
            db.flush()

        product_id = product.id

    logger.info(f"Created product {product_id} with {len(product_data.skus)} sku(s)")
    return load_product_graph(db, product_id)
