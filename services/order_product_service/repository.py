from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete
from services.product_service.models import Product
from .models import OrderProduct

class OrderProductRepository:
    @staticmethod
    async def list_lines(db: AsyncSession, order_id: int):
        result = await db.execute(
            select(
                OrderProduct.order_id,
                OrderProduct.product_id,
                Product.name,
                Product.unit_price,
                OrderProduct.quantity,
                OrderProduct.total_price,
            )
            .join(Product, OrderProduct.product_id == Product.id)
            .where(OrderProduct.order_id == order_id)
        )
        return result.mappings().all()

    @staticmethod
    async def line_exists(db: AsyncSession, order_id: int, product_id: int) -> bool:
        result = await db.execute(
            select(OrderProduct.order_id).where(
                OrderProduct.order_id == order_id,
                OrderProduct.product_id == product_id,
            )
        )
        return result.first() is not None

    @staticmethod
    async def create_line(db: AsyncSession, order_id: int, product_id: int, quantity: int, total_price: Decimal):
        line = OrderProduct(
            order_id=order_id,
            product_id=product_id,
            quantity=quantity,
            total_price=total_price,
        )
        db.add(line)
        await db.flush()
        return line

    @staticmethod
    async def update_line(db: AsyncSession, order_id: int, product_id: int, quantity: int, total_price: Decimal) -> int:
        result = await db.execute(
            update(OrderProduct)
            .where(
                OrderProduct.order_id == order_id,
                OrderProduct.product_id == product_id,
            )
            .values(quantity=quantity, total_price=total_price)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    @staticmethod
    async def delete_line(db: AsyncSession, order_id: int, product_id: int) -> int:
        result = await db.execute(
            delete(OrderProduct)
            .where(
                OrderProduct.order_id == order_id,
                OrderProduct.product_id == product_id,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
