from goodschain.api.deps import get_customer_service
from goodschain.api.routers.crud import build_crud_router
from goodschain.schemas.customer import Customer, CustomerCreate, CustomerUpdate

router = build_crud_router(
    prefix="/customers",
    tags=["customers"],
    resource_name="Customer",
    schema=Customer,
    create_schema=CustomerCreate,
    update_schema=CustomerUpdate,
    get_service=get_customer_service,
)
