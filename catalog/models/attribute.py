from sqlalchemy import Column, String, Integer, ForeignKey, Index, text
from sqlalchemy.orm import relationship
from catalog.database import Base
from catalog.models.mixins import TimestampMixin, SoftDeleteMixin


class Attribute(TimestampMixin, SoftDeleteMixin, Base):
    """A named axis of variation ("Color", "Size") belonging to one product."""
    __tablename__ = "attributes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(50), nullable=False)

    # One live attribute per (product, name); deleted rows don't block reuse of the name
    __table_args__ = (
        Index(
            "uq_attributes_product_id_name_active",
            "product_id",
            "name",
            unique=True,
            sqlite_where=text("status = 'active'"),
            postgresql_where=text("status = 'active'"),
        ),
    )

    # Relationships
    product = relationship("Product", back_populates="attributes")
    values = relationship("AttributeValue", back_populates="attribute", order_by="AttributeValue.id")


class AttributeValue(TimestampMixin, SoftDeleteMixin, Base):
    """One concrete value ("Red") on an attribute's axis."""
    __tablename__ = "attribute_values"

    id = Column(Integer, primary_key=True, autoincrement=True)
    attribute_id = Column(Integer, ForeignKey("attributes.id", ondelete="CASCADE"), nullable=False, index=True)
    value = Column(String(50), nullable=False)

    # Relationships
    attribute = relationship("Attribute", back_populates="values")
    skus = relationship("Sku", secondary="sku_attribute_values", back_populates="attribute_values")
