from decimal import Decimal

from pydantic import BaseModel, Field


class ProductBody(BaseModel):
    name: str
    description: str | None = None
    price: int = Field(strict=True)  # whole currency units

    def normalized_description(self) -> str | None:
        # "" and null both mean no description
        return self.description or None


class ProductResponse(BaseModel):
    id: int
    name: str
    description: str | None
    price: Decimal

    class Config:
        from_attributes = True
