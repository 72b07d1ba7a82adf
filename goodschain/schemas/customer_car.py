from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CustomerCar(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(
        ...,
        description="Unique identifier for the customer-car relationship",
        examples=["cc_01H9ZJ5XQ8X5X8X5X8X5X8X5X8"],
    )
    car_id: str = Field(..., description="Identifier of the car", examples=["car_01H8ZJ5XQ8X5X8X5X8X5X8X5X8"])
    customer_id: str = Field(
        ..., description="Identifier of the customer", examples=["cust_01H7ZCN4X8X5X8X5X8X5X8X5X8"]
    )
    created_at: datetime = Field(..., description="When the relationship was created")
    created_by: str = Field(..., description="User or process that created the relationship", examples=["system"])
    updated_at: datetime = Field(..., description="When the relationship was last updated")
    updated_by: str = Field(..., description="User or process that last updated the relationship", examples=["system"])


class CustomerCarCreate(BaseModel):
    id: str | None = Field(None, max_length=64, description="Generated when omitted")
    car_id: str = Field(..., min_length=1, max_length=64)
    customer_id: str = Field(..., min_length=1, max_length=64)
    created_by: str | None = Field(None, max_length=255)
    updated_by: str | None = Field(None, max_length=255)


class CustomerCarUpdate(BaseModel):
    car_id: str = Field(..., min_length=1, max_length=64)
    customer_id: str = Field(..., min_length=1, max_length=64)
    updated_by: str | None = Field(None, max_length=255)
