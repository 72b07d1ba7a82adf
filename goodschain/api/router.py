from fastapi import APIRouter

from goodschain.api.routers import cars, customer_cars, customers, suppliers

api_router = APIRouter()

api_router.include_router(customers.router)
api_router.include_router(suppliers.router)
api_router.include_router(cars.router)
api_router.include_router(customer_cars.router)
api_router.include_router(customer_cars.lookup_router)
