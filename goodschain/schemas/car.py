from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# Stored as BIGINT
MAX_PRICE = 2**63 - 1


class Car(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Unique identifier for the car", examples=["car_01H8ZJ5XQ8X5X8X5X8X5X8X5X8"])
    name: str = Field(..., description="Name of the car model", examples=["Toyota Camry"])
    supplier_id: str = Field(
        ..., description="Identifier of the supplier", examples=["supp_01H7ZD00X8X5X8X5X8X5X8X5X8"]
    )
    price: int = Field(..., description="Price in the smallest currency unit (e.g. cents)", examples=[25000])
    created_at: datetime = Field(..., description="When the car was created")
    created_by: str = Field(..., description="User or process that created the car", examples=["system"])
    updated_at: datetime = Field(..., description="When the car was last updated")
    updated_by: str = Field(..., description="User or process that last updated the car", examples=["system"])


class CarCreate(BaseModel):
    id: str | None = Field(None, max_length=64, description="Generated when omitted")
    name: str = Field(..., min_length=1, max_length=255)
    supplier_id: str = Field(..., min_length=1, max_length=64)
    price: int = Field(..., gt=0, le=MAX_PRICE, strict=True, description="Price in the smallest currency unit")
    created_by: str | None = Field(None, max_length=255)
    updated_by: str | None = Field(None, max_length=255)


class CarUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    supplier_id: str = Field(..., min_length=1, max_length=64)
    price: int = Field(..., gt=0, le=MAX_PRICE, strict=True, description="Price in the smallest currency unit")
    updated_by: str | None = Field(None, max_length=255)
