import pytest
from catalog.database import UnitOfWork
from catalog.exceptions import InvalidInputError
from catalog.schemas.product import ProductCreate, ProductImageCreate
from catalog.services.product_service import add_product_image, delete_product, delete_sku
from catalog.services.query_service import get_product_detail, list_products
from catalog.services.variant_service import create_product_with_variants


def test_pagination_math(db, make_product):
    for i in range(25):
        make_product(f"Product {i}")

    first = list_products(db, page=1, page_size=10)
    last = list_products(db, page=3, page_size=10)

    assert first["count"] == 25
    assert first["totalPages"] == 3
    assert len(first["data"]) == 10
    assert [p.name for p in first["data"]][:2] == ["Product 0", "Product 1"]
    assert len(last["data"]) == 5
    assert last["totalPages"] == 3


def test_defaults_and_page_past_the_end(db, make_product):
    for i in range(3):
        make_product(f"Product {i}")

    assert len(list_products(db)["data"]) == 3
    beyond = list_products(db, page=4, page_size=2)
    assert beyond["data"] == []
    assert beyond["count"] == 3
    assert beyond["totalPages"] == 2


def test_empty_catalog(db):
    assert list_products(db) == {"data": [], "count": 0, "totalPages": 0}


@pytest.mark.parametrize("page, page_size", [(0, 10), (1, 0), (-1, 5)])
def test_invalid_page_arguments(db, page, page_size):
    with pytest.raises(InvalidInputError):
        list_products(db, page=page, page_size=page_size)


def test_deleted_products_are_hidden_unless_asked_for(db, make_product):
    keep = make_product("Keep")
    gone = make_product("Gone")
    delete_product(db, gone.id)

    visible = list_products(db)
    everything = list_products(db, include_deleted=True)

    assert [p.id for p in visible["data"]] == [keep.id]
    assert visible["count"] == 1
    assert everything["count"] == 2


def _shirt(db):
    return create_product_with_variants(UnitOfWork(db), ProductCreate.model_validate({
        "name": "Shirt",
        "description": "d",
        "skus": [
            {"price": 10, "stock": 5, "attributeValues": [
                {"attributeName": "Color", "value": "Red"},
                {"attributeName": "Size", "value": "L"},
            ]},
            {"price": 12.5, "stock": 0, "attributeValues": [
                {"attributeName": "Color", "value": "Blue"},
            ]},
        ],
    }))


def test_detail_flattens_attribute_values(db):
    product = _shirt(db)
    color_id = product.skus[0].attribute_values[0].attribute.id
    red_id = product.skus[0].attribute_values[0].id

    detail = get_product_detail(db, product.id)

    assert detail["id"] == product.id
    assert detail["name"] == "Shirt"
    assert detail["status"] == "active"
    assert [sku["price"] for sku in detail["skus"]] == [10.0, 12.5]
    assert detail["skus"][0]["attributeValues"][0] == {
        "attributeId": color_id,
        "attributeName": "Color",
        "attributeValueId": red_id,
        "attributeValue": "Red",
    }
    assert [v["attributeName"] for v in detail["skus"][0]["attributeValues"]] == ["Color", "Size"]
    # Both skus point at the same Color attribute
    assert detail["skus"][1]["attributeValues"][0]["attributeId"] == color_id
    assert detail["productImages"] == []


def test_detail_does_not_touch_storage(db):
    product = _shirt(db)

    get_product_detail(db, product.id)
    db.expire_all()

    sku = product.skus[0]
    assert sku.attribute_values[0].attribute.name == "Color"


def test_detail_includes_images_in_display_order(db):
    product = _shirt(db)
    add_product_image(db, product.id, ProductImageCreate(url="https://cdn.example.com/2.jpg", display_order=2))
    add_product_image(db, product.id, ProductImageCreate(url="https://cdn.example.com/1.jpg", display_order=1, type="banner"))

    detail = get_product_detail(db, product.id)

    assert [image["url"] for image in detail["productImages"]] == [
        "https://cdn.example.com/1.jpg",
        "https://cdn.example.com/2.jpg",
    ]
    assert detail["productImages"][0]["type"] == "banner"


def test_detail_hides_deleted_skus(db):
    product = _shirt(db)
    delete_sku(db, product.skus[1].id)

    assert len(get_product_detail(db, product.id)["skus"]) == 1
    assert len(get_product_detail(db, product.id, include_deleted=True)["skus"]) == 2


def test_detail_for_missing_or_deleted_product(db, make_product):
    assert get_product_detail(db, 12345) is None

    product = make_product()
    delete_product(db, product.id)

    assert get_product_detail(db, product.id) is None
    assert get_product_detail(db, product.id, include_deleted=True)["status"] == "deleted"
