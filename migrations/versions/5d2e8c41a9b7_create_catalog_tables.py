"""create_catalog_tables

Revision ID: 5d2e8c41a9b7
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "5d2e8c41a9b7"
down_revision = None
branch_labels = None
depends_on = None


def _lifecycle_columns():
    return [
        sa.Column("status", sa.String(length=20), nullable=False, server_default="active"),
        sa.Column("deleted_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    """Create products, skus, attributes, attribute values, images and the sku/value join table."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    existing_tables = inspector.get_table_names()

    if "products" not in existing_tables:
        op.create_table(
            "products",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("name", sa.String(length=100), nullable=False),
            sa.Column("description", sa.Text(), nullable=False),
            sa.Column("cover_url", sa.String(length=500), nullable=True),
            sa.Column("show_price", sa.Numeric(10, 2), nullable=True),
            *_lifecycle_columns(),
            sa.CheckConstraint("show_price IS NULL OR show_price >= 0", name="ck_products_show_price_non_negative"),
            sa.PrimaryKeyConstraint("id", name="pk_products"),
        )
        op.create_index("ix_products_name", "products", ["name"], unique=False)
        op.create_index("ix_products_status", "products", ["status"], unique=False)

    if "product_images" not in existing_tables:
        op.create_table(
            "product_images",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("product_id", sa.Integer(), nullable=False),
            sa.Column("url", sa.String(length=500), nullable=False),
            sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
            sa.Column("type", sa.String(length=20), nullable=False, server_default="list"),
            *_lifecycle_columns(),
            sa.ForeignKeyConstraint(["product_id"], ["products.id"], name="fk_product_images_product_id_products", ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id", name="pk_product_images"),
        )
        op.create_index("ix_product_images_product_id", "product_images", ["product_id"], unique=False)
        op.create_index("ix_product_images_status", "product_images", ["status"], unique=False)

    if "attributes" not in existing_tables:
        op.create_table(
            "attributes",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("product_id", sa.Integer(), nullable=False),
            sa.Column("name", sa.String(length=50), nullable=False),
            *_lifecycle_columns(),
            sa.ForeignKeyConstraint(["product_id"], ["products.id"], name="fk_attributes_product_id_products", ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id", name="pk_attributes"),
        )
        op.create_index("ix_attributes_product_id", "attributes", ["product_id"], unique=False)
        op.create_index("ix_attributes_status", "attributes", ["status"], unique=False)
        # Only live attributes compete for a name
        op.create_index(
            "uq_attributes_product_id_name_active",
            "attributes",
            ["product_id", "name"],
            unique=True,
            sqlite_where=sa.text("status = 'active'"),
            postgresql_where=sa.text("status = 'active'"),
        )

    if "attribute_values" not in existing_tables:
        op.create_table(
            "attribute_values",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("attribute_id", sa.Integer(), nullable=False),
            sa.Column("value", sa.String(length=50), nullable=False),
            *_lifecycle_columns(),
            sa.ForeignKeyConstraint(["attribute_id"], ["attributes.id"], name="fk_attribute_values_attribute_id_attributes", ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id", name="pk_attribute_values"),
        )
        op.create_index("ix_attribute_values_attribute_id", "attribute_values", ["attribute_id"], unique=False)
        op.create_index("ix_attribute_values_status", "attribute_values", ["status"], unique=False)

    if "skus" not in existing_tables:
        op.create_table(
            "skus",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("product_id", sa.Integer(), nullable=False),
            sa.Column("price", sa.Numeric(10, 2), nullable=False),
            sa.Column("stock", sa.Integer(), nullable=False, server_default="0"),
            *_lifecycle_columns(),
            sa.CheckConstraint("price >= 0", name="ck_skus_price_non_negative"),
            sa.CheckConstraint("stock >= 0", name="ck_skus_stock_non_negative"),
            sa.ForeignKeyConstraint(["product_id"], ["products.id"], name="fk_skus_product_id_products", ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id", name="pk_skus"),
        )
        op.create_index("ix_skus_product_id", "skus", ["product_id"], unique=False)
        op.create_index("ix_skus_status", "skus", ["status"], unique=False)

    if "sku_attribute_values" not in existing_tables:
        op.create_table(
            "sku_attribute_values",
            sa.Column("sku_id", sa.Integer(), nullable=False),
            sa.Column("attribute_value_id", sa.Integer(), nullable=False),
            sa.ForeignKeyConstraint(["sku_id"], ["skus.id"], name="fk_sku_attribute_values_sku_id_skus", ondelete="CASCADE"),
            sa.ForeignKeyConstraint(
                ["attribute_value_id"],
                ["attribute_values.id"],
                name="fk_sku_attribute_values_attribute_value_id_attribute_values",
                ondelete="CASCADE",
            ),
            sa.PrimaryKeyConstraint("sku_id", "attribute_value_id", name="pk_sku_attribute_values"),
        )


def downgrade() -> None:
    op.drop_table("sku_attribute_values")
    op.drop_index("ix_skus_status", table_name="skus")
    op.drop_index("ix_skus_product_id", table_name="skus")
    op.drop_table("skus")
    op.drop_index("ix_attribute_values_status", table_name="attribute_values")
    op.drop_index("ix_attribute_values_attribute_id", table_name="attribute_values")
    op.drop_table("attribute_values")
    op.drop_index("uq_attributes_product_id_name_active", table_name="attributes")
    op.drop_index("ix_attributes_status", table_name="attributes")
    op.drop_index("ix_attributes_product_id", table_name="attributes")
    op.drop_table("attributes")
    op.drop_index("ix_product_images_status", table_name="product_images")
    op.drop_index("ix_product_images_product_id", table_name="product_images")
    op.drop_table("product_images")
    op.drop_index("ix_products_status", table_name="products")
    op.drop_index("ix_products_name", table_name="products")
    op.drop_table("products")
