from datetime import date as date_type
from typing import Optional

from pydantic import BaseModel


class EmployeeSummary(BaseModel):
    employee_id: str
    employee_name: Optional[str] = None
    total_days: int = 0
    total_present: int = 0
    total_absent: int = 0
    attendance_percentage: int = 0


class DashboardSummary(BaseModel):
    date: date_type
    total_employees: int = 0
    total_attendance_records: int = 0
    today_present: int = 0
    today_absent: int = 0
