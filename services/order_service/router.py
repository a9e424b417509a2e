from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from shared.config.database import get_db
from .schemas import MessageResponse, OrderPayload, OrderResponse, OrderUpdateResponse
from .service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])

@router.get("", response_model=list[OrderResponse])
async def list_orders(db: AsyncSession = Depends(get_db)):
    return await OrderService.list_orders(db)

@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int, db: AsyncSession = Depends(get_db)):
    return await OrderService.get_order(db, order_id)

@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(payload: OrderPayload | None = None, db: AsyncSession = Depends(get_db)):
    order_number = payload.order_number if payload else None
    return await OrderService.create_order(db, order_number)

@router.put("/{order_id}", response_model=OrderUpdateResponse)
async def update_order(order_id: int, payload: OrderPayload | None = None, db: AsyncSession = Depends(get_db)):
    order_number = payload.order_number if payload else None
    return await OrderService.update_order(db, order_id, order_number)

@router.delete("/{order_id}", response_model=MessageResponse)
async def delete_order(order_id: int, db: AsyncSession = Depends(get_db)):
    await OrderService.delete_order(db, order_id)
    return {"message": "Order deleted"}
