from pydantic import Field
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
from catalog.models.product_image import ProductImageType
from catalog.models.mixins import EntityStatus
from catalog.schemas.common import CamelModel, EntityId, MAX_ID
from catalog.schemas.attribute import AttributeValueResponse


class SkuAttributeValueInput(CamelModel):
    """
    One attribute value of a sku in a full product payload.

    The attribute is referenced by `attributeId`, by `attributeName`, or by
    both (the name is used when the id does not resolve).
    """
    attribute_id: Optional[int] = Field(None, ge=1, le=MAX_ID)
    attribute_name: Optional[str] = Field(None, max_length=50)
    value: str = Field(..., min_length=1, max_length=50)


class SkuCreate(CamelModel):
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    stock: int = Field(..., ge=0)


class SkuVariantCreate(SkuCreate):
    attribute_values: List[SkuAttributeValueInput] = Field(default_factory=list)


class ProductCreate(CamelModel):
    """Full payload: product, skus and their attribute graph in one call."""
    name: str = Field(..., min_length=1, max_length=100)
    description: str = ""
    cover_url: Optional[str] = Field(None, max_length=500)
    show_price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    skus: List[SkuVariantCreate] = Field(default_factory=list)


class ProductEntityCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = ""
    cover_url: Optional[str] = Field(None, max_length=500)


class ProductImageCreate(CamelModel):
    url: str = Field(..., min_length=1, max_length=500)
    type: ProductImageType = ProductImageType.LIST
    display_order: int = Field(default=0, ge=0)


class SkuAttributeValuesAttach(CamelModel):
    attribute_value_ids: List[EntityId] = Field(default_factory=list)


class ProductImageResponse(CamelModel):
    id: int
    url: str
    type: ProductImageType
    display_order: int


class SkuResponse(CamelModel):
    id: int
    product_id: int
    price: float
    stock: int
    attribute_values: List[AttributeValueResponse] = Field(default_factory=list)


class ProductSummaryResponse(CamelModel):
    id: int
    name: str
    description: str
    cover_url: Optional[str] = None
    show_price: Optional[float] = None
    status: EntityStatus
    created_at: datetime
    updated_at: datetime


class ProductResponse(ProductSummaryResponse):
    skus: List[SkuResponse] = Field(default_factory=list)
