from decimal import Decimal

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from services.product_service.repository import ProductRepository
from shared.errors import ConflictError, NotFoundError, ValidationError
from shared.observability import order_lines_written_total
from .repository import OrderProductRepository
from .schemas import OrderProductPayload

logger = structlog.get_logger(__name__)


def _parse_id(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class OrderProductService:
    @staticmethod
    def _require_fields(data: OrderProductPayload | None) -> OrderProductPayload:
        # Falsy check: quantity=0 is rejected along with absent fields
        if data is None or not data.order_id or not data.product_id or not data.quantity:
            raise ValidationError("Missing required fields")
        return data

    @staticmethod
    async def _line_total(db: AsyncSession, product_id: int, quantity: int) -> Decimal:
        unit_price = await ProductRepository.get_unit_price(db, product_id, lock=True)
        if unit_price is None:
            raise NotFoundError("Product not found")
        return Decimal(unit_price) * quantity

    @staticmethod
    async def list_lines(db: AsyncSession, order_id: str | None):
        parsed = _parse_id(order_id)
        if parsed is None:
            return []
        return await OrderProductRepository.list_lines(db, parsed)

    @staticmethod
    async def add_line(db: AsyncSession, data: OrderProductPayload | None) -> dict:
        data = OrderProductService._require_fields(data)

        async with db.begin():
            total_price = await OrderProductService._line_total(db, data.product_id, data.quantity)
            if await OrderProductRepository.line_exists(db, data.order_id, data.product_id):
                raise ConflictError("Order product already exists")
            await OrderProductRepository.create_line(
                db, data.order_id, data.product_id, data.quantity, total_price
            )

        order_lines_written_total.labels(operation="create").inc()
        logger.info(
            "order_line_created",
            order_id=data.order_id,
            product_id=data.product_id,
            quantity=data.quantity,
            total_price=str(total_price),
        )
        return {
            "order_id": data.order_id,
            "product_id": data.product_id,
            "quantity": data.quantity,
            "total_price": total_price,
        }

    @staticmethod
    async def update_line(db: AsyncSession, data: OrderProductPayload | None) -> dict:
        data = OrderProductService._require_fields(data)

        async with db.begin():
            # Always the current product price, never the one stored on the line
            total_price = await OrderProductService._line_total(db, data.product_id, data.quantity)
            affected = await OrderProductRepository.update_line(
                db, data.order_id, data.product_id, data.quantity, total_price
            )
            if affected == 0:
                raise NotFoundError("Order product not found")

        order_lines_written_total.labels(operation="update").inc()
        logger.info(
            "order_line_updated",
            order_id=data.order_id,
            product_id=data.product_id,
            quantity=data.quantity,
            total_price=str(total_price),
        )
        return {
            "order_id": data.order_id,
            "product_id": data.product_id,
            "quantity": data.quantity,
            "total_price": total_price,
        }

    @staticmethod
    async def remove_line(db: AsyncSession, order_id: str | None, product_id: str | None):
        if not order_id or not product_id:
            raise ValidationError("Missing order_id or product_id")

        parsed_order_id, parsed_product_id = _parse_id(order_id), _parse_id(product_id)
        if parsed_order_id is None or parsed_product_id is None:
            raise ValidationError("Invalid order_id or product_id")

        async with db.begin():
            affected = await OrderProductRepository.delete_line(db, parsed_order_id, parsed_product_id)
        if affected == 0:
            raise NotFoundError("Order product not found")

        order_lines_written_total.labels(operation="delete").inc()
        logger.info("order_line_deleted", order_id=parsed_order_id, product_id=parsed_product_id)
