from goodschain.api.deps import get_supplier_service
from goodschain.api.routers.crud import build_crud_router
from goodschain.schemas.supplier import Supplier, SupplierCreate, SupplierUpdate

router = build_crud_router(
    prefix="/suppliers",
    tags=["suppliers"],
    resource_name="Supplier",
    schema=Supplier,
    create_schema=SupplierCreate,
    update_schema=SupplierUpdate,
    get_service=get_supplier_service,
)
