from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from catalog.api.deps import ResourceId
from catalog.database import get_db
from catalog.schemas.attribute import AttributeValueCreate, AttributeValueResponse
from catalog.schemas.common import ResponseModel
from catalog.services import attribute_service

router = APIRouter()


@router.post("/{attribute_id}/values", response_model=ResponseModel, status_code=status.HTTP_201_CREATED)
def create_attribute_value(attribute_id: ResourceId, value_data: AttributeValueCreate, db: Session = Depends(get_db)):
    """Add a value ("Red") to an existing attribute"""
    attribute_value = attribute_service.create_attribute_value(db, attribute_id, value_data.value)
    return ResponseModel(
        success=True,
        data=AttributeValueResponse.model_validate(attribute_value).to_response(),
        message="Attribute value created successfully"
    )
