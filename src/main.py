from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.db.pg_client import get_database_client
from app.log_config import setup_logging
from app.settings import settings
from product.api import router as product_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL, debug=settings.DEBUG, echo_sql=settings.DB_ECHO)
    db_client = get_database_client()
    if settings.DB_CREATE_TABLES:
        await db_client.create_all()
    yield
    await db_client.dispose()


app = FastAPI(title="Products API", debug=settings.DEBUG, lifespan=lifespan)

app.include_router(product_router)
