from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, computed_field, field_validator

from app.models.enums import DepartmentEnum


class EmployeeCreate(BaseModel):
    full_name: str = Field(..., examples=["Jane Doe"])
    email: EmailStr = Field(..., examples=["jane@company.com"])
    department: DepartmentEnum = Field(..., examples=["HR"])

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Full name is required")
        if len(value) < 2:
            raise ValueError("Name must be at least 2 characters")
        return value

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    employee_id: str = Field(validation_alias="employee_code")
    full_name: str
    email: str
    department: str
    created_at: Optional[datetime] = None

    # the web client keys rows and deletes by `_id`
    @computed_field(alias="_id")
    @property
    def record_id(self) -> int:
        return self.id
