from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from catalog.api.deps import ResourceId
from catalog.database import get_db
from catalog.schemas.common import ResponseModel
from catalog.schemas.product import SkuAttributeValuesAttach, SkuResponse
from catalog.services import product_service

router = APIRouter()


@router.post("/{sku_id}/attribute-values", response_model=ResponseModel)
def add_attribute_values(sku_id: ResourceId, attach_data: SkuAttributeValuesAttach, db: Session = Depends(get_db)):
    """Link existing attribute values to a sku; all ids must exist"""
    sku = product_service.add_attribute_values_to_sku(db, sku_id, attach_data.attribute_value_ids)
    return ResponseModel(success=True, data=SkuResponse.model_validate(sku).to_response())


@router.delete("/{sku_id}", response_model=ResponseModel)
def delete_sku(sku_id: ResourceId, db: Session = Depends(get_db)):
    product_service.delete_sku(db, sku_id)
    return ResponseModel(success=True, message="Sku deleted successfully")
