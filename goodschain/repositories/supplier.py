from goodschain.db.models.supplier import Supplier as SupplierModel
from goodschain.repositories.base import ResourceDescriptor, SQLRepository

SUPPLIER = ResourceDescriptor(
    name="Supplier",
    model=SupplierModel,
    fields=("name", "address", "phone", "email"),
)


class SupplierRepository(SQLRepository[SupplierModel]):
    resource = SUPPLIER
