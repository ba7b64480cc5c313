from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from product.models import Product
from product.repositories import ProductRepositoryInterface


class ProductRepository(ProductRepositoryInterface):
    async def get_product(self, product_id: int, session: AsyncSession) -> Product:
        return await session.get_one(Product, product_id)

    async def get_products(self, session: AsyncSession) -> List[Product]:
        result = await session.execute(select(Product))
        return list(result.scalars().all())

    async def create_product(self, product: Product, session: AsyncSession) -> Product:
        session.add(product)
        await session.commit()
        await session.refresh(product)
        return product

    async def update_product(self, product: Product, session: AsyncSession) -> Product:
        session.add(product)
        await session.commit()
        await session.refresh(product)
        return product

    async def delete_product(self, product: Product, session: AsyncSession) -> None:
        await session.delete(product)
        await session.commit()
