"""
Attribute resolution.

Attributes are scoped to a product and, among live rows, unique by name
within it. Every write path that needs an attribute goes through
`resolve_attribute` so that a name is never created twice for one product.
"""
from dataclasses import dataclass
from typing import Optional, Union
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from catalog.exceptions import InvalidInputError, NotFoundError
from catalog.models.attribute import Attribute, AttributeValue
from catalog.models.product import Product
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttributeById:
    id: int


@dataclass(frozen=True)
class AttributeByName:
    name: str


AttributeRef = Union[AttributeById, AttributeByName]


def get_active_product(db: Session, product_id: int) -> Product:
    product = db.query(Product).filter(Product.id == product_id, Product.active()).first()
    if not product:
        raise NotFoundError(f"Product with ID {product_id} not found")
    return product


def get_active_attribute(db: Session, attribute_id: int) -> Attribute:
    attribute = db.query(Attribute).filter(Attribute.id == attribute_id, Attribute.active()).first()
    if not attribute:
        raise NotFoundError(f"Attribute with ID {attribute_id} not found")
    return attribute


def normalize_attribute_name(name: Optional[str]) -> str:
    """Strip surrounding whitespace; a blank name is rejected."""
    if not name or not name.strip():
        raise InvalidInputError("attributeName is required")
    return name.strip()


def _find_attribute_by_name(db: Session, product_id: int, name: str) -> Optional[Attribute]:
    return db.query(Attribute).filter(
        Attribute.product_id == product_id,
        Attribute.name == name,
        Attribute.active()
    ).first()


def _get_or_create_by_name(db: Session, product_id: int, name: str) -> Attribute:
    attribute = _find_attribute_by_name(db, product_id, name)
    if attribute:
        return attribute

    # The unique index on (product_id, name) is the real guard; the savepoint
    # keeps a losing insert from aborting the caller's transaction.
    try:
        with db.begin_nested():
            attribute = Attribute(product_id=product_id, name=name)
            db.add(attribute)
    except IntegrityError:
        attribute = _find_attribute_by_name(db, product_id, name)
        if attribute is None:
            raise
        logger.info(f"Attribute '{name}' was created concurrently for product {product_id}, reusing id {attribute.id}")
        return attribute

    logger.info(f"Created attribute '{name}' (id {attribute.id}) for product {product_id}")
    return attribute


def resolve_attribute(db: Session, product_id: int, ref: AttributeRef) -> Optional[Attribute]:
    """
    Resolve a single reference within `product_id`.

    `AttributeById` only looks up and returns None on a miss.
    `AttributeByName` looks up and creates the attribute when it is missing.
    """
    if isinstance(ref, AttributeById):
        return db.query(Attribute).filter(
            Attribute.id == ref.id,
            Attribute.product_id == product_id,
            Attribute.active()
        ).first()

    if isinstance(ref, AttributeByName):
        return _get_or_create_by_name(db, product_id, normalize_attribute_name(ref.name))

    raise TypeError(f"Unsupported attribute reference: {ref!r}")


def resolve_or_create_attribute(
    db: Session,
    product_id: int,
    attribute_id: Optional[int] = None,
    attribute_name: Optional[str] = None
) -> Attribute:
    """Resolve by id when one is given, otherwise (or on a miss) by name."""
    attribute = None
    if attribute_id is not None:
        attribute = resolve_attribute(db, product_id, AttributeById(attribute_id))
        if attribute is None:
            logger.debug(f"Attribute id {attribute_id} not found for product {product_id}, falling back to name")

    if attribute is None:
        attribute = resolve_attribute(db, product_id, AttributeByName(attribute_name or ""))

    return attribute


def resolve_product_attribute(
    db: Session,
    product_id: int,
    attribute_id: Optional[int] = None,
    attribute_name: Optional[str] = None
) -> Attribute:
    """Standalone resolution: checks the product, then resolves and commits."""
    get_active_product(db, product_id)
    try:
        attribute = resolve_or_create_attribute(db, product_id, attribute_id, attribute_name)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(attribute)
    return attribute


def create_attribute(db: Session, product_id: int, name: str) -> Attribute:
    """
    Create an attribute directly, without looking for one of the same name.

    The name is normalized the same way resolution does it. A live duplicate
    is rejected by the unique index and surfaces as an IntegrityError.
    """
    product = get_active_product(db, product_id)
    name = normalize_attribute_name(name)

    attribute = Attribute(name=name, product=product)
    db.add(attribute)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(attribute)

    logger.info(f"Created attribute '{name}' (id {attribute.id}) for product {product_id}")
    return attribute


def create_attribute_value(db: Session, attribute_id: int, value: str) -> AttributeValue:
    attribute = get_active_attribute(db, attribute_id)

    attribute_value = AttributeValue(value=value, attribute=attribute)
    db.add(attribute_value)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(attribute_value)

    logger.info(f"Created value '{value}' (id {attribute_value.id}) for attribute {attribute_id}")
    return attribute_value
