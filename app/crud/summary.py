from datetime import date
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.crud.employee import get_employee
from app.helpers.utils import get_today
from app.models.employee import Attendance, Employee
from app.models.enums import AttendanceStatusEnum
from app.schemas.summary import DashboardSummary, EmployeeSummary


def attendance_percentage(present: int, total: int) -> int:
    """Present share of `total` as a whole percent, halves rounded up."""
    if total <= 0:
        return 0
    return (present * 200 + total) // (2 * total)

def _count_by_status(query) -> dict:
    rows = query.with_entities(Attendance.status, func.count(Attendance.id)).group_by(Attendance.status).all()
    return {status: count for status, count in rows}

def get_employee_summary(db: Session, identifier) -> EmployeeSummary:
    # computed from the ledger on every call, nothing cached
    employee = get_employee(db, identifier)
    counts = _count_by_status(
        db.query(Attendance).filter(Attendance.employee_id == employee.id)
    )
    present = counts.get(AttendanceStatusEnum.PRESENT.value, 0)
    absent = counts.get(AttendanceStatusEnum.ABSENT.value, 0)
    total_days = present + absent

    return EmployeeSummary(
        employee_id=employee.employee_code,
        employee_name=employee.full_name,
        total_days=total_days,
        total_present=present,
        total_absent=absent,
        attendance_percentage=attendance_percentage(present, total_days),
    )

def get_dashboard_summary(db: Session, today: Optional[date] = None) -> DashboardSummary:
    today = today or get_today()
    total_employees = db.query(func.count(Employee.id)).scalar() or 0
    total_records = db.query(func.count(Attendance.id)).scalar() or 0
    today_counts = _count_by_status(
        db.query(Attendance).filter(Attendance.date == today)
    )

    return DashboardSummary(
        date=today,
        total_employees=total_employees,
        total_attendance_records=total_records,
        today_present=today_counts.get(AttendanceStatusEnum.PRESENT.value, 0),
        today_absent=today_counts.get(AttendanceStatusEnum.ABSENT.value, 0),
    )
