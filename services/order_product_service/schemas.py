from pydantic import BaseModel

class OrderProductPayload(BaseModel):
    # Presence is checked by the service so that every missing field
    # yields the same "Missing required fields" message
    order_id: int | None = None
    product_id: int | None = None
    quantity: int | None = None

class OrderProductResponse(BaseModel):
    order_id: int
    product_id: int
    quantity: int
    total_price: float

class OrderLineResponse(BaseModel):
    order_id: int
    product_id: int
    name: str
    unit_price: float
    quantity: int
    total_price: float

class MessageResponse(BaseModel):
    message: str
