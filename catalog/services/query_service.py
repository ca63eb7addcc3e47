"""
Read path: product listing and the denormalized product detail.
"""
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session, joinedload
from catalog.config import settings
from catalog.models.attribute import AttributeValue
from catalog.models.product import Product
from catalog.models.sku import Sku
from catalog.utils.pagination import paginate


def list_products(
    db: Session,
    page: int = 1,
    page_size: int = settings.DEFAULT_PAGE_SIZE,
    include_deleted: bool = False
) -> Dict[str, Any]:
    """Page through products without loading skus or images."""
    query = db.query(Product)
    if not include_deleted:
        query = query.filter(Product.active())
    query = query.order_by(Product.id.asc())

    return paginate(query, page, page_size)


def flatten_attribute_values(sku: Sku, include_deleted: bool = False) -> List[Dict[str, Any]]:
    """Turn value -> attribute nesting into one flat record per value."""
    return [
        {
            "attributeId": value.attribute.id,
            "attributeName": value.attribute.name,
            "attributeValueId": value.id,
            "attributeValue": value.value,
        }
        for value in sku.attribute_values
        if include_deleted or (value.is_active and value.attribute.is_active)
    ]


def get_product_detail(db: Session, product_id: int, include_deleted: bool = False) -> Optional[Dict[str, Any]]:
    """
    Product with skus, their flattened attribute values, and images.

    Returns None when the product doesn't exist (or is deleted and
    `include_deleted` is off). Storage is not modified.
    """
    query = db.query(Product)\
        .options(
            joinedload(Product.skus)
            .joinedload(Sku.attribute_values)
            .joinedload(AttributeValue.attribute),
            joinedload(Product.product_images)
        )\
        .filter(Product.id == product_id)
    if not include_deleted:
        query = query.filter(Product.active())

    product = query.first()
    if not product:
        return None

    skus = [sku for sku in product.skus if include_deleted or sku.is_active]
    images = [image for image in product.product_images if include_deleted or image.is_active]

    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "coverUrl": product.cover_url,
        "showPrice": float(product.show_price) if product.show_price is not None else None,
        "status": product.status.value,
        "createdAt": product.created_at.isoformat() if product.created_at else None,
        "updatedAt": product.updated_at.isoformat() if product.updated_at else None,
        "skus": [
            {
                "id": sku.id,
                "price": float(sku.price),
                "stock": sku.stock,
                "attributeValues": flatten_attribute_values(sku, include_deleted),
            }
            for sku in skus
        ],
        "productImages": [
            {
                "id": image.id,
                "url": image.url,
                "type": image.type.value,
                "displayOrder": image.display_order,
            }
            for image in images
        ],
    }
