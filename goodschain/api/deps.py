import logging

from fastapi import Depends
from sqlalchemy.orm import Session

from goodschain.db import SessionLocal
from goodschain.repositories.car import CarRepository
from goodschain.repositories.customer import CustomerRepository
from goodschain.repositories.customer_car import CustomerCarRepository
from goodschain.repositories.supplier import SupplierRepository
from goodschain.services.base import ResourceService
from goodschain.services.customer_car import CustomerCarService

service_logger = logging.getLogger("goodschain.services")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_customer_service(db: Session = Depends(get_db)) -> ResourceService:
    return ResourceService(CustomerRepository(db), logger=service_logger)


def get_supplier_service(db: Session = Depends(get_db)) -> ResourceService:
    return ResourceService(SupplierRepository(db), logger=service_logger)


def get_car_service(db: Session = Depends(get_db)) -> ResourceService:
    return ResourceService(CarRepository(db), logger=service_logger)


def get_customer_car_service(db: Session = Depends(get_db)) -> CustomerCarService:
    return CustomerCarService(CustomerCarRepository(db), logger=service_logger)
