from abc import ABC, abstractmethod
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from product.models import Product


class ProductRepositoryInterface(ABC):
    """Storage port used by ``ProductUseCases``.

    ``get_product`` raises ``sqlalchemy.exc.NoResultFound`` for an unknown id.
    Any other storage failure propagates as whatever the backend raises.
    """

    @abstractmethod
    async def get_product(self, product_id: int, session: AsyncSession) -> Product:
        raise NotImplementedError

    @abstractmethod
    async def get_products(self, session: AsyncSession) -> List[Product]:
        raise NotImplementedError

    @abstractmethod
    async def create_product(self, product: Product, session: AsyncSession) -> Product:
        raise NotImplementedError

    @abstractmethod
    async def update_product(self, product: Product, session: AsyncSession) -> Product:
        raise NotImplementedError

    @abstractmethod
    async def delete_product(self, product: Product, session: AsyncSession) -> None:
        raise NotImplementedError
