from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from shared.config.database import get_db
from .schemas import MessageResponse, OrderLineResponse, OrderProductPayload, OrderProductResponse
from .service import OrderProductService

router = APIRouter(prefix="/order_products", tags=["order_products"])

# Ids arrive as raw strings: a missing or malformed order_id lists nothing
# instead of failing validation
@router.get("", response_model=list[OrderLineResponse])
async def list_order_products(
    order_id: str | None = Query(default=None),
    db: AsyncSession = Depends(get_db)
):
    return await OrderProductService.list_lines(db, order_id)

@router.post("", response_model=OrderProductResponse, status_code=status.HTTP_201_CREATED)
async def add_order_product(
    payload: OrderProductPayload | None = None,
    db: AsyncSession = Depends(get_db)
):
    return await OrderProductService.add_line(db, payload)

@router.put("", response_model=OrderProductResponse)
async def update_order_product(
    payload: OrderProductPayload | None = None,
    db: AsyncSession = Depends(get_db)
):
    return await OrderProductService.update_line(db, payload)

@router.delete("", response_model=MessageResponse)
async def delete_order_product(
    order_id: str | None = Query(default=None),
    product_id: str | None = Query(default=None),
    db: AsyncSession = Depends(get_db)
):
    await OrderProductService.remove_line(db, order_id, product_id)
    return {"message": "Order product deleted"}
