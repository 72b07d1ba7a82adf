from fastapi import APIRouter, Depends

from goodschain.api.deps import get_customer_car_service
from goodschain.api.routers.crud import ERROR_RESPONSES, build_crud_router
from goodschain.schemas.customer_car import CustomerCar, CustomerCarCreate, CustomerCarUpdate
from goodschain.services.customer_car import CustomerCarService

router = build_crud_router(
    prefix="/customer-cars",
    tags=["customer-cars"],
    resource_name="Customer car relationship",
    schema=CustomerCar,
    create_schema=CustomerCarCreate,
    update_schema=CustomerCarUpdate,
    get_service=get_customer_car_service,
)

# Lookups by either side of the relationship, nested under the owning resource
lookup_router = APIRouter(tags=["customer-cars"], responses=ERROR_RESPONSES)


@lookup_router.get("/customers/{customer_id}/cars", response_model=list[CustomerCar])
def get_cars_of_customer(
    customer_id: str,
    service: CustomerCarService = Depends(get_customer_car_service),
):
    """
    Get all customer-car relationships of a customer. An unknown customer yields an empty list.
    """
    return [CustomerCar.model_validate(row) for row in service.get_by_customer_id(customer_id)]


@lookup_router.get("/cars/{car_id}/customers", response_model=list[CustomerCar])
def get_customers_of_car(
    car_id: str,
    service: CustomerCarService = Depends(get_customer_car_service),
):
    """
    Get all customer-car relationships of a car. An unknown car yields an empty list.
    """
    return [CustomerCar.model_validate(row) for row in service.get_by_car_id(car_id)]
