from pydantic import Field
from typing import Optional
from datetime import datetime
from catalog.schemas.common import CamelModel, MAX_ID


class AttributeCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=50)


class AttributeResolve(CamelModel):
    """Reference an attribute by id, by name, or by id with a name to fall back on."""
    attribute_id: Optional[int] = Field(None, ge=1, le=MAX_ID)
    attribute_name: Optional[str] = Field(None, max_length=50)


class AttributeValueCreate(CamelModel):
    value: str = Field(..., min_length=1, max_length=50)


class AttributeResponse(CamelModel):
    id: int
    product_id: int
    name: str
    created_at: datetime


class AttributeValueResponse(CamelModel):
    id: int
    attribute_id: int
    value: str
    attribute: Optional[AttributeResponse] = None
