from sqlalchemy import Column, ForeignKey, Integer, Numeric
from shared.config.database import Base

class OrderProduct(Base):
    __tablename__ = "order_products"

    # Composite identity: one line per (order, product)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), primary_key=True)
    quantity = Column(Integer, nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False) # unit_price * quantity at write time
