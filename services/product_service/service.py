from sqlalchemy.ext.asyncio import AsyncSession
from .repository import ProductRepository

class ProductService:

    @staticmethod
    async def list_products(db: AsyncSession):
        return await ProductRepository.get_all_products(db)
