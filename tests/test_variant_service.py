from decimal import Decimal
import pytest
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from catalog.database import UnitOfWork
from catalog.exceptions import InvalidInputError
from catalog.models import Product, Sku, Attribute, AttributeValue, sku_attribute_values
from catalog.schemas.product import ProductCreate, SkuVariantCreate
from catalog.services.variant_service import create_product_with_variants


def row_counts(db):
    return {
        "products": db.query(Product).count(),
        "skus": db.query(Sku).count(),
        "attributes": db.query(Attribute).count(),
        "attribute_values": db.query(AttributeValue).count(),
        "links": db.execute(select(func.count()).select_from(sku_attribute_values)).scalar(),
    }


def test_single_sku_single_value(db):
    payload = ProductCreate.model_validate({
        "name": "Shirt",
        "description": "d",
        "skus": [{"price": 10, "stock": 5, "attributeValues": [{"attributeName": "Color", "value": "Red"}]}],
    })

    product = create_product_with_variants(UnitOfWork(db), payload)

    assert product.id is not None
    assert product.name == "Shirt"
    assert len(product.skus) == 1
    sku = product.skus[0]
    assert sku.price == Decimal("10")
    assert sku.stock == 5
    assert len(sku.attribute_values) == 1
    assert sku.attribute_values[0].value == "Red"
    assert sku.attribute_values[0].attribute.name == "Color"
    assert sku.attribute_values[0].attribute.product_id == product.id


def test_graph_matches_input_counts_and_shares_attributes(db):
    payload = ProductCreate.model_validate({
        "name": "Tee",
        "description": "cotton",
        "skus": [
            {"price": 19.9, "stock": 3, "attributeValues": [
                {"attributeName": "Color", "value": "Red"},
                {"attributeName": "Size", "value": "M"},
            ]},
            {"price": 21.9, "stock": 0, "attributeValues": [
                {"attributeName": "Color", "value": "Blue"},
                {"attributeName": "Size", "value": "L"},
            ]},
        ],
    })

    product = create_product_with_variants(UnitOfWork(db), payload)

    assert [len(sku.attribute_values) for sku in product.skus] == [2, 2]
    # Color and Size each exist once for the product, values are per entry
    assert sorted(a.name for a in db.query(Attribute).filter_by(product_id=product.id)) == ["Color", "Size"]
    assert row_counts(db) == {"products": 1, "skus": 2, "attributes": 2, "attribute_values": 4, "links": 4}

    labels = [
        {(v.attribute.name, v.value) for v in sku.attribute_values}
        for sku in product.skus
    ]
    assert labels == [{("Color", "Red"), ("Size", "M")}, {("Color", "Blue"), ("Size", "L")}]


def test_unknown_attribute_id_falls_back_to_name(db):
    payload = ProductCreate.model_validate({
        "name": "Mug",
        "skus": [{"price": 5, "stock": 1, "attributeValues": [
            {"attributeId": 77, "attributeName": "Capacity", "value": "350ml"},
        ]}],
    })

    product = create_product_with_variants(UnitOfWork(db), payload)

    assert product.skus[0].attribute_values[0].attribute.name == "Capacity"


def test_product_without_skus(db):
    product = create_product_with_variants(UnitOfWork(db), ProductCreate(name="Gift card"))

    assert product.skus == []
    assert row_counts(db)["products"] == 1


def test_missing_attribute_name_rolls_back_everything(db):
    payload = ProductCreate.model_validate({
        "name": "Shirt",
        "description": "d",
        "skus": [
            {"price": 10, "stock": 5, "attributeValues": [{"attributeName": "Color", "value": "Red"}]},
            {"price": 12, "stock": 1, "attributeValues": [{"value": "Large"}]},
        ],
    })

    with pytest.raises(InvalidInputError, match="attributeName is required"):
        create_product_with_variants(UnitOfWork(db), payload)

    assert row_counts(db) == {"products": 0, "skus": 0, "attributes": 0, "attribute_values": 0, "links": 0}


def test_constraint_violation_rolls_back_everything(db):
    # Bypass request validation to reach the database CHECK constraint
    bad_sku = SkuVariantCreate.model_construct(price=Decimal("1.00"), stock=-1, attribute_values=[])
    payload = ProductCreate.model_construct(
        name="Shirt",
        description="d",
        cover_url=None,
        show_price=None,
        skus=[bad_sku],
    )

    with pytest.raises(IntegrityError):
        create_product_with_variants(UnitOfWork(db), payload)

    assert row_counts(db) == {"products": 0, "skus": 0, "attributes": 0, "attribute_values": 0, "links": 0}


def test_failed_assembly_leaves_earlier_products_alone(db):
    create_product_with_variants(UnitOfWork(db), ProductCreate(name="Keeper"))

    with pytest.raises(InvalidInputError):
        create_product_with_variants(UnitOfWork(db), ProductCreate.model_validate({
            "name": "Broken",
            "skus": [{"price": 1, "stock": 1, "attributeValues": [{"attributeId": 5, "value": "x"}]}],
        }))

    assert [p.name for p in db.query(Product)] == ["Keeper"]
