from sqlalchemy import Column, String, Integer, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum
from catalog.database import Base
from catalog.models.mixins import TimestampMixin, SoftDeleteMixin


class ProductImageType(str, enum.Enum):
    LIST = "list"  # Thumbnail shown in product listings
    DETAIL = "detail"
    BANNER = "banner"


class ProductImage(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "product_images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    url = Column(String(500), nullable=False)
    display_order = Column(Integer, default=0, nullable=False)
    type = Column(
        SQLEnum(ProductImageType, native_enum=False, length=20, values_callable=lambda types: [t.value for t in types]),
        default=ProductImageType.LIST,
        nullable=False,
    )

    # Relationships
    product = relationship("Product", back_populates="product_images")
