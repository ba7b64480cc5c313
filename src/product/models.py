from decimal import Decimal

from sqlalchemy import Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

from app.db.pg_client import Base

# ids are a 32-bit INTEGER column, assigned from 1
PRODUCT_ID_MIN = 1
PRODUCT_ID_MAX = 2**31 - 1

PRICE_PRECISION = 38
PRICE_SCALE = 2


class Product(Base):
    @declared_attr.directive
    def __tablename__(cls) -> str:
        return "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(PRICE_PRECISION, PRICE_SCALE, asdecimal=True))

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name={self.name!r}, price={self.price})>"
