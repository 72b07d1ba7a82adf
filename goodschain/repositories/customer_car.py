from abc import abstractmethod

from goodschain.db.models.customer_car import CustomerCar as CustomerCarModel
from goodschain.repositories.base import Repository, ResourceDescriptor, SQLRepository

CUSTOMER_CAR = ResourceDescriptor(
    name="Customer car relationship",
    model=CustomerCarModel,
    fields=("car_id", "customer_id"),
)


class CustomerCarLookup(Repository[CustomerCarModel]):
    """Customer-car relationships can also be listed by either side."""

    @abstractmethod
    def get_by_customer_id(self, customer_id: str) -> list[CustomerCarModel]:
        pass

    @abstractmethod
    def get_by_car_id(self, car_id: str) -> list[CustomerCarModel]:
        pass


class CustomerCarRepository(SQLRepository[CustomerCarModel], CustomerCarLookup):
    resource = CUSTOMER_CAR

    def get_by_customer_id(self, customer_id: str) -> list[CustomerCarModel]:
        """All relationships of one customer, newest first. Empty when none."""
        return list(self._select(CustomerCarModel.customer_id == customer_id).scalars().all())

    def get_by_car_id(self, car_id: str) -> list[CustomerCarModel]:
        """All relationships of one car, newest first. Empty when none."""
        return list(self._select(CustomerCarModel.car_id == car_id).scalars().all())
