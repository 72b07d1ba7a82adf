from sqlalchemy import Column, DateTime, String

from goodschain.db.base import Base


class Supplier(Base):
    __tablename__ = "supplier"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    phone = Column(String(32), nullable=True)
    email = Column(String(320), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    created_by = Column(String(255), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    updated_by = Column(String(255), nullable=False)
