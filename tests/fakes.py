from sqlalchemy.exc import OperationalError

from product.repositories import ProductRepositoryInterface


class FailingRepository(ProductRepositoryInterface):
    """Every call fails the way a dropped connection would."""

    def _fail(self):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    async def get_product(self, product_id, session):
        self._fail()

    async def get_products(self, session):
        self._fail()

    async def create_product(self, product, session):
        self._fail()

    async def update_product(self, product, session):
        self._fail()

    async def delete_product(self, product, session):
        self._fail()
