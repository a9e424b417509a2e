import datetime

from sqlalchemy import Column, Date, Integer, Numeric, String
from shared.config.database import Base

class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    order_number = Column(String(64), nullable=False)
    # Informational columns, never written by the service
    date = Column(Date, default=datetime.date.today)
    num_products = Column(Integer, default=0)
    final_price = Column(Numeric(10, 2), default=0)
