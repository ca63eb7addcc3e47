from sqlalchemy import Column, Integer, Numeric, ForeignKey, CheckConstraint, Table
from sqlalchemy.orm import relationship
from catalog.database import Base
from catalog.models.mixins import TimestampMixin, SoftDeleteMixin


# Join table: a sku's variant identity is the set of attribute values linked here
sku_attribute_values = Table(
    "sku_attribute_values",
    Base.metadata,
    Column("sku_id", Integer, ForeignKey("skus.id", ondelete="CASCADE"), primary_key=True),
    Column("attribute_value_id", Integer, ForeignKey("attribute_values.id", ondelete="CASCADE"), primary_key=True),
)


class Sku(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "skus"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    stock = Column(Integer, default=0, nullable=False)

    # Constraints
    __table_args__ = (
        CheckConstraint("price >= 0", name="price_non_negative"),
        CheckConstraint("stock >= 0", name="stock_non_negative"),
    )

    # Relationships
    product = relationship("Product", back_populates="skus")
    attribute_values = relationship(
        "AttributeValue",
        secondary=sku_attribute_values,
        back_populates="skus",
        order_by="AttributeValue.id",
    )
