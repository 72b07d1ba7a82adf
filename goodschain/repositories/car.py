from goodschain.db.models.car import Car as CarModel
from goodschain.repositories.base import ResourceDescriptor, SQLRepository

CAR = ResourceDescriptor(
    name="Car",
    model=CarModel,
    fields=("name", "supplier_id", "price"),
)


class CarRepository(SQLRepository[CarModel]):
    resource = CAR
