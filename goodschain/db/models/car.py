from sqlalchemy import BigInteger, Column, DateTime, String

from goodschain.db.base import Base


class Car(Base):
    __tablename__ = "car"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)
    # No foreign key: the supplier reference is not enforced by the schema
    supplier_id = Column("supp_id", String(64), nullable=False, index=True)
    # Smallest currency unit (e.g. cents)
    price = Column(BigInteger, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    created_by = Column(String(255), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    updated_by = Column(String(255), nullable=False)
