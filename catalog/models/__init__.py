from catalog.models.mixins import EntityStatus
from catalog.models.product import Product
from catalog.models.product_image import ProductImage, ProductImageType
from catalog.models.attribute import Attribute, AttributeValue
from catalog.models.sku import Sku, sku_attribute_values

__all__ = [
    "EntityStatus",
    "Product",
    "ProductImage",
    "ProductImageType",
    "Attribute",
    "AttributeValue",
    "Sku",
    "sku_attribute_values",
]
