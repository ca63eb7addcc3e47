from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from catalog.api.deps import ResourceId, get_unit_of_work
from catalog.config import settings
from catalog.database import get_db, UnitOfWork
from catalog.exceptions import NotFoundError
from catalog.schemas.attribute import AttributeCreate, AttributeResolve, AttributeResponse
from catalog.schemas.common import ResponseModel
from catalog.schemas.product import (
    ProductCreate, ProductEntityCreate, ProductImageCreate, SkuCreate,
    ProductResponse, ProductSummaryResponse, ProductImageResponse, SkuResponse
)
from catalog.services import attribute_service, product_service, query_service, variant_service

router = APIRouter()


@router.post("", response_model=ResponseModel, status_code=status.HTTP_201_CREATED)
def create_product(
    product_data: ProductCreate,
    uow: UnitOfWork = Depends(get_unit_of_work)
):
    """Create a product together with its skus and attribute values"""
    product = variant_service.create_product_with_variants(uow, product_data)
    return ResponseModel(
        success=True,
        data=ProductResponse.model_validate(product).to_response(),
        message="Product created successfully"
    )


@router.get("", response_model=ResponseModel)
def list_products(
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, alias="pageSize"),
    db: Session = Depends(get_db)
):
    """List products (summary only, no skus)"""
    result = query_service.list_products(db, page=page, page_size=page_size)
    return ResponseModel(
        success=True,
        data={
            "data": [ProductSummaryResponse.model_validate(p).to_response() for p in result["data"]],
            "count": result["count"],
            "totalPages": result["totalPages"]
        }
    )


@router.post("/entity", response_model=ResponseModel, status_code=status.HTTP_201_CREATED)
def create_product_entity(product_data: ProductEntityCreate, db: Session = Depends(get_db)):
    """Create a bare product to compose step by step"""
    product = product_service.create_product_entity(db, product_data)
    return ResponseModel(
        success=True,
        data=ProductSummaryResponse.model_validate(product).to_response(),
        message="Product created successfully"
    )


@router.get("/{product_id}", response_model=ResponseModel)
def get_product(product_id: ResourceId, db: Session = Depends(get_db)):
    """Product detail with flattened sku attribute values"""
    product = query_service.get_product_detail(db, product_id)
    if product is None:
        raise NotFoundError(f"Product with ID {product_id} not found")
    return ResponseModel(success=True, data=product)


@router.delete("/{product_id}", response_model=ResponseModel)
def delete_product(product_id: ResourceId, db: Session = Depends(get_db)):
    product_service.delete_product(db, product_id)
    return ResponseModel(success=True, message="Product deleted successfully")


@router.post("/{product_id}/skus", response_model=ResponseModel, status_code=status.HTTP_201_CREATED)
def create_sku(product_id: ResourceId, sku_data: SkuCreate, db: Session = Depends(get_db)):
    sku = product_service.create_sku(db, product_id, sku_data)
    return ResponseModel(
        success=True,
        data=SkuResponse.model_validate(sku).to_response(),
        message="Sku created successfully"
    )


@router.post("/{product_id}/attributes", response_model=ResponseModel, status_code=status.HTTP_201_CREATED)
def create_attribute(product_id: ResourceId, attribute_data: AttributeCreate, db: Session = Depends(get_db)):
    """Create an attribute as given; no check for an existing one of the same name"""
    attribute = attribute_service.create_attribute(db, product_id, attribute_data.name)
    return ResponseModel(
        success=True,
        data=AttributeResponse.model_validate(attribute).to_response(),
        message="Attribute created successfully"
    )


@router.post("/{product_id}/attributes/resolve", response_model=ResponseModel)
def resolve_attribute(product_id: ResourceId, reference: AttributeResolve, db: Session = Depends(get_db)):
    """Find the product's attribute by id or name, creating it by name if needed"""
    attribute = attribute_service.resolve_product_attribute(
        db,
        product_id,
        attribute_id=reference.attribute_id,
        attribute_name=reference.attribute_name
    )
    return ResponseModel(success=True, data=AttributeResponse.model_validate(attribute).to_response())


@router.post("/{product_id}/images", response_model=ResponseModel, status_code=status.HTTP_201_CREATED)
def add_product_image(product_id: ResourceId, image_data: ProductImageCreate, db: Session = Depends(get_db)):
    product_image = product_service.add_product_image(db, product_id, image_data)
    return ResponseModel(
        success=True,
        data=ProductImageResponse.model_validate(product_image).to_response(),
        message="Image added successfully"
    )
