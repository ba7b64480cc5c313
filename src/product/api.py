import logging
from typing import List, NoReturn

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.pg_client import get_session
from app.errors import ServiceError
from product.pg_repository import ProductRepository
from product.schemas import ProductBody, ProductResponse
from product.use_cases import ProductUseCases

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


def get_product_use_cases() -> ProductUseCases:
    product_repo = ProductRepository()
    return ProductUseCases(product_repo=product_repo)


def raise_service_error(error: ServiceError) -> NoReturn:
    if error.is_client_error:
        logger.warning("%s: %s", error.message, error.error)
    else:
        logger.error(error.message, exc_info=error.error)
    raise HTTPException(status_code=error.code, detail=error.message)


@router.get("/", response_model=List[ProductResponse])
async def get_products(
    session: AsyncSession = Depends(get_session),
    product_use_cases: ProductUseCases = Depends(get_product_use_cases),
):
    products = await product_use_cases.get_products(session)
    if isinstance(products, ServiceError):
        raise_service_error(products)
    return products


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    session: AsyncSession = Depends(get_session),
    product_use_cases: ProductUseCases = Depends(get_product_use_cases),
):
    product = await product_use_cases.get_product(product_id, session)
    if isinstance(product, ServiceError):
        raise_service_error(product)
    return product


@router.post("/", response_model=ProductResponse, status_code=201)
async def create_product(
    product_data: ProductBody,
    session: AsyncSession = Depends(get_session),
    product_use_cases: ProductUseCases = Depends(get_product_use_cases),
):
    product = await product_use_cases.create_product(product_data, session)
    if isinstance(product, ServiceError):
        raise_service_error(product)
    return product


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    product_data: ProductBody,
    session: AsyncSession = Depends(get_session),
    product_use_cases: ProductUseCases = Depends(get_product_use_cases),
):
    product = await product_use_cases.update_product(product_id, product_data, session)
    if isinstance(product, ServiceError):
        raise_service_error(product)
    return product


@router.delete("/{product_id}", status_code=204)
async def delete_product(
    product_id: int,
    session: AsyncSession = Depends(get_session),
    product_use_cases: ProductUseCases = Depends(get_product_use_cases),
):
    error = await product_use_cases.delete_product(product_id, session)
    if error is not None:
        raise_service_error(error)
    return
