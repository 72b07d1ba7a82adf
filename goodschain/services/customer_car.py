from goodschain.db.models.customer_car import CustomerCar as CustomerCarModel
from goodschain.repositories.customer_car import CustomerCarLookup
from goodschain.services.base import ResourceService


class CustomerCarService(ResourceService[CustomerCarModel]):
    repository: CustomerCarLookup

    def get_by_customer_id(self, customer_id: str) -> list[CustomerCarModel]:
        return self.repository.get_by_customer_id(customer_id)

    def get_by_car_id(self, car_id: str) -> list[CustomerCarModel]:
        return self.repository.get_by_car_id(car_id)
