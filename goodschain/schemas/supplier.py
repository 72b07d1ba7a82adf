from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class Supplier(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(
        ..., description="Unique identifier for the supplier", examples=["supp_01H7ZD00X8X5X8X5X8X5X8X5X8"]
    )
    name: str = Field(..., description="Name of the supplier", examples=["Supplier Inc."])
    address: str = Field(..., description="Address of the supplier", examples=["456 Industrial Rd, Factory City, USA"])
    phone: str | None = Field(None, description="Phone number of the supplier (optional)", examples=["555-987-6543"])
    email: str = Field(..., description="Email address of the supplier", examples=["contact@supplierinc.com"])
    created_at: datetime = Field(..., description="When the supplier was created")
    created_by: str = Field(..., description="User or process that created the supplier", examples=["system"])
    updated_at: datetime = Field(..., description="When the supplier was last updated")
    updated_by: str = Field(..., description="User or process that last updated the supplier", examples=["system"])


class SupplierCreate(BaseModel):
    id: str | None = Field(None, max_length=64, description="Generated when omitted")
    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=255)
    phone: str | None = Field(None, max_length=32)
    email: EmailStr
    created_by: str | None = Field(None, max_length=255)
    updated_by: str | None = Field(None, max_length=255)


class SupplierUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=255)
    phone: str | None = Field(None, max_length=32)
    email: EmailStr
    updated_by: str | None = Field(None, max_length=255)
