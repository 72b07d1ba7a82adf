from goodschain.api.deps import get_car_service
from goodschain.api.routers.crud import build_crud_router
from goodschain.schemas.car import Car, CarCreate, CarUpdate

router = build_crud_router(
    prefix="/cars",
    tags=["cars"],
    resource_name="Car",
    schema=Car,
    create_schema=CarCreate,
    update_schema=CarUpdate,
    get_service=get_car_service,
)
