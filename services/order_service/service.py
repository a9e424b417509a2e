import datetime

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import NotFoundError, ValidationError
from shared.observability import orders_written_total
from .repository import OrderRepository

logger = structlog.get_logger(__name__)

class OrderService:
    @staticmethod
    def _require_order_number(order_number: str | None) -> str:
        if not order_number:
            raise ValidationError("Missing order_number")
        return order_number

    @staticmethod
    async def list_orders(db: AsyncSession):
        return await OrderRepository.list_orders(db)

    @staticmethod
    async def get_order(db: AsyncSession, order_id: int):
        order = await OrderRepository.get_order(db, order_id)
        if not order:
            raise NotFoundError("Order not found")
        return order

    @staticmethod
    async def create_order(db: AsyncSession, order_number: str | None) -> dict:
        order_number = OrderService._require_order_number(order_number)

        async with db.begin():
            order_id = await OrderRepository.create_order(db, order_number)

        orders_written_total.labels(operation="create").inc()
        logger.info("order_created", order_id=order_id, order_number=order_number)

        # date/num_products/final_price are reported, not read back
        return {
            "id": order_id,
            "order_number": order_number,
            "date": datetime.date.today(),
            "num_products": 0,
            "final_price": 0.00,
        }

    @staticmethod
    async def update_order(db: AsyncSession, order_id: int, order_number: str | None) -> dict:
        order_number = OrderService._require_order_number(order_number)

        async with db.begin():
            affected = await OrderRepository.update_order_number(db, order_id, order_number)
        if affected == 0:
            raise NotFoundError("Order not found")

        orders_written_total.labels(operation="update").inc()
        logger.info("order_updated", order_id=order_id, order_number=order_number)
        return {"id": order_id, "order_number": order_number}

    @staticmethod
    async def delete_order(db: AsyncSession, order_id: int):
        async with db.begin():
            affected = await OrderRepository.delete_order(db, order_id)
        if affected == 0:
            raise NotFoundError("Order not found")

        orders_written_total.labels(operation="delete").inc()
        logger.info("order_deleted", order_id=order_id)
