from datetime import date as date_type, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from app.models.enums import AttendanceStatusEnum


class AttendanceCreate(BaseModel):
    # public employee code ("EMP001") or the numeric id
    employee_id: str = Field(..., examples=["EMP001"])
    date: date_type = Field(..., examples=["2024-01-10"])
    status: AttendanceStatusEnum = Field(..., examples=["Present"])

    @field_validator("employee_id", mode="before")
    @classmethod
    def validate_employee_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise ValueError("Please select an employee")
        return value

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().capitalize()
        return value


class AttendanceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    employee_id: Optional[str] = Field(default=None, validation_alias="employee_code")
    employee_name: Optional[str] = None
    date: date_type
    status: str
    created_at: Optional[datetime] = None

    @computed_field(alias="_id")
    @property
    def record_id(self) -> int:
        return self.id
