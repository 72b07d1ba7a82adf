from sqlalchemy import Column, DateTime, String

from goodschain.db.base import Base


class CustomerCar(Base):
    __tablename__ = "customer_car"

    id = Column(String(64), primary_key=True)
    car_id = Column(String(64), nullable=False, index=True)
    customer_id = Column("cust_id", String(64), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    created_by = Column(String(255), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    updated_by = Column(String(255), nullable=False)
