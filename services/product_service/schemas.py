from pydantic import BaseModel

class ProductResponse(BaseModel):
    id: int
    name: str
    unit_price: float

    class Config:
        from_attributes = True
