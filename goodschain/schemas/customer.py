from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class Customer(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(
        ..., description="Unique identifier for the customer", examples=["cust_01H7ZCN4X8X5X8X5X8X5X8X5X8"]
    )
    name: str = Field(..., description="Name of the customer", examples=["John Doe"])
    address: str = Field(..., description="Address of the customer", examples=["123 Main St, Anytown, USA"])
    phone: str | None = Field(None, description="Phone number of the customer (optional)", examples=["555-123-4567"])
    email: str = Field(..., description="Email address of the customer", examples=["john.doe@example.com"])
    created_at: datetime = Field(..., description="When the customer was created")
    created_by: str = Field(..., description="User or process that created the customer", examples=["system"])
    updated_at: datetime = Field(..., description="When the customer was last updated")
    updated_by: str = Field(..., description="User or process that last updated the customer", examples=["system"])


class CustomerCreate(BaseModel):
    id: str | None = Field(None, max_length=64, description="Generated when omitted")
    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=255)
    phone: str | None = Field(None, max_length=32)
    email: EmailStr
    created_by: str | None = Field(None, max_length=255)
    updated_by: str | None = Field(None, max_length=255)


class CustomerUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=255)
    phone: str | None = Field(None, max_length=32)
    email: EmailStr
    updated_by: str | None = Field(None, max_length=255)
