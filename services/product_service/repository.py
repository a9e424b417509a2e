from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from .models import Product

class ProductRepository:

    @staticmethod
    async def get_all_products(db: AsyncSession):
        result = await db.execute(select(Product))
        return result.scalars().all()

    @staticmethod
    async def get_unit_price(db: AsyncSession, product_id: int, lock: bool = False) -> Decimal | None:
        """
        Current unit price of a product, or None if it does not exist.
        With lock=True the row is held FOR SHARE until the transaction ends,
        so the price cannot change underneath a line total being written.
        """
        stmt = select(Product.unit_price).where(Product.id == product_id)
        if lock:
            stmt = stmt.with_for_update(read=True)
        result = await db.execute(stmt)
        return result.scalar_one_or_none()
