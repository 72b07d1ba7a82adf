from goodschain.db.models.customer import Customer
from goodschain.db.models.supplier import Supplier
from goodschain.db.models.car import Car
from goodschain.db.models.customer_car import CustomerCar

__all__ = ["Customer", "Supplier", "Car", "CustomerCar"]
