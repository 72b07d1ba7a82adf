from goodschain.db.models.customer import Customer as CustomerModel
from goodschain.repositories.base import ResourceDescriptor, SQLRepository

CUSTOMER = ResourceDescriptor(
    name="Customer",
    model=CustomerModel,
    fields=("name", "address", "phone", "email"),
)


class CustomerRepository(SQLRepository[CustomerModel]):
    resource = CUSTOMER
