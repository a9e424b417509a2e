from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete
from .models import Order

class OrderRepository:
    @staticmethod
    async def list_orders(db: AsyncSession):
        result = await db.execute(select(Order))
        return result.scalars().all()

    @staticmethod
    async def get_order(db: AsyncSession, order_id: int):
        result = await db.execute(select(Order).where(Order.id == order_id))
        return result.scalars().first()

    @staticmethod
    async def create_order(db: AsyncSession, order_number: str) -> int:
        order = Order(order_number=order_number)
        db.add(order)
        await db.flush()
        return order.id

    @staticmethod
    async def update_order_number(db: AsyncSession, order_id: int, order_number: str) -> int:
        result = await db.execute(
            update(Order)
            .where(Order.id == order_id)
            .values(order_number=order_number)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    @staticmethod
    async def delete_order(db: AsyncSession, order_id: int) -> int:
        result = await db.execute(
            delete(Order)
            .where(Order.id == order_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
