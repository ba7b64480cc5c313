import logging
from decimal import Context, Decimal, DecimalException, InvalidOperation
from typing import List

from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import ErrorCode, ServiceError
from product.models import PRICE_PRECISION, PRICE_SCALE, PRODUCT_ID_MAX, PRODUCT_ID_MIN, Product
from product.repositories import ProductRepositoryInterface
from product.schemas import ProductBody

logger = logging.getLogger(__name__)

_PRICE_QUANTUM = Decimal(1).scaleb(-PRICE_SCALE)
# Quantize must not round and must fit the column
_PRICE_CONTEXT = Context(prec=PRICE_PRECISION, traps=[InvalidOperation])


class InvalidPriceError(ValueError):
    pass


def to_price(value: int) -> Decimal | ServiceError:
    """Convert a whole-unit price into the stored decimal form.

    Returns a ``ServiceError`` when the value is negative, cannot be parsed,
    or does not fit the ``price`` column.
    """
    if value < 0:
        return ServiceError(
            message="Price cannot be negative",
            error=InvalidPriceError("invalid price"),
            code=ErrorCode.BAD_REQUEST,
        )

    try:
        dec = Decimal(str(value))
    except (ValueError, InvalidOperation) as exc:
        return ServiceError(message="Invalid price format", error=exc, code=ErrorCode.BAD_REQUEST)

    try:
        return dec.quantize(_PRICE_QUANTUM, context=_PRICE_CONTEXT)
    except DecimalException as exc:
        return ServiceError(
            message="Failed to convert price to decimal", error=exc, code=ErrorCode.INTERNAL_ERROR
        )


class ProductUseCases:
    """Product operations over an injected storage port.

    Every method takes the session to run against and returns either its
    result or a ``ServiceError``. Errors are returned, never raised; task
    cancellation is left to propagate.
    """

    def __init__(self, product_repo: ProductRepositoryInterface):
        self.product_repo = product_repo

    async def get_products(self, session: AsyncSession) -> List[Product] | ServiceError:
        try:
            return await self.product_repo.get_products(session)
        except Exception as exc:
            return ServiceError(message="Unable to get products", error=exc, code=ErrorCode.INTERNAL_ERROR)

    async def get_product(self, product_id: int, session: AsyncSession) -> Product | ServiceError:
        if not PRODUCT_ID_MIN <= product_id <= PRODUCT_ID_MAX:
            # outside the id column, so no such row can exist
            return ServiceError(
                message="Product not found",
                error=NoResultFound(f"Product id {product_id} is out of range"),
                code=ErrorCode.NOT_FOUND,
            )
        try:
            return await self.product_repo.get_product(product_id, session)
        except NoResultFound as exc:
            return ServiceError(message="Product not found", error=exc, code=ErrorCode.NOT_FOUND)
        except Exception as exc:
            return ServiceError(message="Unable to get product", error=exc, code=ErrorCode.INTERNAL_ERROR)

    async def create_product(self, product_data: ProductBody, session: AsyncSession) -> Product | ServiceError:
        price = to_price(product_data.price)
        if isinstance(price, ServiceError):
            return price

        product = Product(
            name=product_data.name,
            description=product_data.normalized_description(),
            price=price,
        )
        try:
            product = await self.product_repo.create_product(product, session)
        except Exception as exc:
            return ServiceError(message="Unable to create product", error=exc, code=ErrorCode.INTERNAL_ERROR)

        logger.debug("Created product %s", product.id)
        return product

    async def update_product(
        self, product_id: int, product_data: ProductBody, session: AsyncSession
    ) -> Product | ServiceError:
        product = await self.get_product(product_id, session)
        if isinstance(product, ServiceError):
            return product

        price = to_price(product_data.price)
        if isinstance(price, ServiceError):
            return price

        product.name = product_data.name
        product.description = product_data.normalized_description()
        product.price = price
        try:
            product = await self.product_repo.update_product(product, session)
        except Exception as exc:
            return ServiceError(message="Unable to update product", error=exc, code=ErrorCode.INTERNAL_ERROR)

        logger.debug("Updated product %s", product_id)
        return product

    async def delete_product(self, product_id: int, session: AsyncSession) -> ServiceError | None:
        product = await self.get_product(product_id, session)
        if isinstance(product, ServiceError):
            return product

        try:
            await self.product_repo.delete_product(product, session)
        except Exception as exc:
            return ServiceError(message="Unable to delete product", error=exc, code=ErrorCode.INTERNAL_ERROR)

        logger.debug("Deleted product %s", product_id)
        return None
