from typing import Annotated, Optional, Any, Dict
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Largest id a signed 64-bit INTEGER column can hold
MAX_ID = 2**63 - 1

EntityId = Annotated[int, Field(ge=1, le=MAX_ID)]


class ResponseModel(BaseModel):
    """Standard API response model"""
    success: bool
    data: Optional[Any] = None
    message: Optional[str] = None
    error: Optional[Dict[str, Any]] = None


class CamelModel(BaseModel):
    """Base for payloads exchanged in camelCase; snake_case names are accepted too."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def error_body(code: str, message: str, details: Any = None) -> Dict[str, Any]:
    """Body of every non-2xx response."""
    return ResponseModel(
        success=False,
        message=message,
        error={"code": code, "details": details},
    ).model_dump()
