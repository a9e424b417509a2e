import datetime

from pydantic import BaseModel

class OrderPayload(BaseModel):
    # Optional so that a missing value is reported as "Missing order_number"
    order_number: str | None = None

class OrderResponse(BaseModel):
    id: int
    order_number: str
    date: datetime.date | None = None
    num_products: int | None = None
    final_price: float | None = None

    class Config:
        from_attributes = True

class OrderUpdateResponse(BaseModel):
    id: int
    order_number: str

class MessageResponse(BaseModel):
    message: str
