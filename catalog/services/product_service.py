"""
Incremental composition.

Each function here is its own transaction: it commits on success and rolls
back on failure. Nothing is held between calls, so a caller composing
product -> sku -> attribute -> value -> attach must expect any referenced
row to have been deleted in between.
"""
from typing import List
from sqlalchemy.orm import Session, joinedload
from catalog.exceptions import NotFoundError
from catalog.models.attribute import AttributeValue
from catalog.models.product import Product
from catalog.models.product_image import ProductImage
from catalog.models.sku import Sku
from catalog.schemas.product import ProductEntityCreate, SkuCreate, ProductImageCreate
from catalog.services.attribute_service import get_active_product
import logging

logger = logging.getLogger(__name__)


def _commit(db: Session, *instances):
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    for instance in instances:
        db.refresh(instance)


def create_product_entity(db: Session, product_data: ProductEntityCreate) -> Product:
    """Insert a bare product; skus and attributes are added separately."""
    product = Product(
        name=product_data.name,
        description=product_data.description,
        cover_url=product_data.cover_url,
    )
    db.add(product)
    _commit(db, product)

    logger.info(f"Created product entity {product.id}")
    return product


def create_sku(db: Session, product_id: int, sku_data: SkuCreate) -> Sku:
    product = get_active_product(db, product_id)

    sku = Sku(product=product, price=sku_data.price, stock=sku_data.stock)
    db.add(sku)
    _commit(db, sku)

    logger.info(f"Created sku {sku.id} for product {product_id}")
    return sku


def get_active_sku(db: Session, sku_id: int, with_values: bool = False) -> Sku:
    query = db.query(Sku)
    if with_values:
        query = query.options(joinedload(Sku.attribute_values))
    sku = query.filter(Sku.id == sku_id, Sku.active()).first()
    if not sku:
        raise NotFoundError(f"Sku with ID {sku_id} not found")
    return sku


def add_attribute_values_to_sku(db: Session, sku_id: int, attribute_value_ids: List[int]) -> Sku:
    """
    Link existing attribute values to a sku.

    All ids must exist or nothing is linked. Links are only ever added;
    values the sku already carries are left in place.
    """
    sku = get_active_sku(db, sku_id, with_values=True)

    requested_ids = set(attribute_value_ids)
    attribute_values = []
    if requested_ids:
        attribute_values = db.query(AttributeValue).filter(
            AttributeValue.id.in_(requested_ids),
            AttributeValue.active()
        ).all()

    if len(attribute_values) < len(requested_ids):
        missing = sorted(requested_ids - {value.id for value in attribute_values})
        logger.warning(f"Refusing to attach values {missing} to sku {sku_id}: not found")
        raise NotFoundError("some attribute values not found")

    attached_ids = {value.id for value in sku.attribute_values}
    for attribute_value in attribute_values:
        if attribute_value.id not in attached_ids:
            sku.attribute_values.append(attribute_value)

    _commit(db, sku)

    logger.info(f"Attached {len(attribute_values)} attribute value(s) to sku {sku_id}")
    return sku


def add_product_image(db: Session, product_id: int, image_data: ProductImageCreate) -> ProductImage:
    product = get_active_product(db, product_id)

    product_image = ProductImage(
        product=product,
        url=image_data.url,
        type=image_data.type,
        display_order=image_data.display_order,
    )
    db.add(product_image)
    _commit(db, product_image)

    logger.info(f"Added {product_image.type.value} image {product_image.id} to product {product_id}")
    return product_image


def delete_product(db: Session, product_id: int) -> Product:
    """Soft delete: the row stays, reads stop returning it."""
    product = get_active_product(db, product_id)
    product.soft_delete()
    _commit(db, product)

    logger.info(f"Soft-deleted product {product_id}")
    return product


def delete_sku(db: Session, sku_id: int) -> Sku:
    sku = get_active_sku(db, sku_id)
    sku.soft_delete()
    _commit(db, sku)

    logger.info(f"Soft-deleted sku {sku_id}")
    return sku
