from sqlalchemy import Column, String, Integer, Numeric, Text, CheckConstraint
from sqlalchemy.orm import relationship
from catalog.database import Base
from catalog.models.mixins import TimestampMixin, SoftDeleteMixin


class Product(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    cover_url = Column(String(500), nullable=True)
    show_price = Column(Numeric(10, 2), nullable=True)  # Display price, independent of sku prices

    # Constraints
    __table_args__ = (
        CheckConstraint("show_price IS NULL OR show_price >= 0", name="show_price_non_negative"),
    )

    # Relationships
    skus = relationship("Sku", back_populates="product", order_by="Sku.id")
    attributes = relationship("Attribute", back_populates="product", order_by="Attribute.id")
    product_images = relationship("ProductImage", back_populates="product", order_by="ProductImage.display_order")
