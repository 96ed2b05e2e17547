import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, contains_eager

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.crud.employee import find_employee
from app.helpers.utils import get_today, parse_employee_identifier, parse_record_id
from app.models.employee import Attendance, Employee
from app.schemas.attendance import AttendanceCreate

logger = logging.getLogger(__name__)


def list_attendance(db: Session, employee_id=None, date: Optional[date] = None) -> List[Attendance]:
    """
    Attendance entries, newest first.

    `employee_id` takes the public code or numeric id. Filters combine with
    AND. Entries come back with their employee eagerly joined so the name
    can be read without another query.
    """
    query = (
        db.query(Attendance)
        .outerjoin(Attendance.employee)
        .options(contains_eager(Attendance.employee))
    )

    if employee_id not in (None, ""):
        employee_pk = parse_employee_identifier(employee_id)
        if employee_pk is None:
            return []
        query = query.filter(Attendance.employee_id == employee_pk)

    if date is not None:
        query = query.filter(Attendance.date == date)

    return query.order_by(Attendance.date.desc(), Attendance.id.desc()).all()

def get_attendance(db: Session, attendance_id) -> Attendance:
    record_pk = parse_record_id(attendance_id)
    attendance = None
    if record_pk is not None:
        attendance = db.query(Attendance).filter(Attendance.id == record_pk).first()
    if not attendance:
        raise NotFoundError(f"Attendance record {attendance_id} not found", message="attendance_not_found")
    return attendance

def mark_attendance(db: Session, data: AttendanceCreate, today: Optional[date] = None) -> Attendance:
    today = today or get_today()
    if data.date > today:
        raise ValidationError(
            f"Attendance cannot be marked for a future date ({data.date.isoformat()})",
            message="attendance_future_date",
            errors=[{"field": "date", "message": "Date cannot be in the future"}],
        )

    employee = find_employee(db, data.employee_id)
    if not employee:
        raise NotFoundError(f"Employee '{data.employee_id}' not found", message="employee_not_found")
    employee_pk = employee.id
    employee_code = employee.employee_code

    duplicate = db.query(Attendance.id).filter(
        Attendance.employee_id == employee_pk,
        Attendance.date == data.date,
    ).first()
    if duplicate:
        logger.warning("Attendance already marked for %s on %s", employee_code, data.date)
        raise ConflictError(
            f"Attendance already marked for {employee_code} on {data.date.isoformat()}",
            message="attendance_already_marked",
        )

    attendance = Attendance(employee_id=employee_pk, date=data.date, status=data.status.value)
    try:
        db.add(attendance)
        db.commit()
    except IntegrityError:
        # lost a race: either a concurrent mark for the same day or the
        # employee was deleted between the lookup and the insert
        db.rollback()
        if not db.query(Employee.id).filter(Employee.id == employee_pk).first():
            raise NotFoundError(f"Employee '{data.employee_id}' not found", message="employee_not_found")
        logger.warning("Attendance already marked for %s on %s", employee_code, data.date)
        raise ConflictError(
            f"Attendance already marked for {employee_code} on {data.date.isoformat()}",
            message="attendance_already_marked",
        )
    except Exception:
        db.rollback()
        raise

    db.refresh(attendance)
    logger.info("Marked %s %s on %s", employee_code, attendance.status, attendance.date)
    return attendance

def delete_attendance(db: Session, attendance_id) -> dict:
    attendance = get_attendance(db, attendance_id)
    snapshot = {
        "id": attendance.id,
        "_id": attendance.id,
        "employee_id": attendance.employee_code,
        "date": attendance.date.isoformat(),
    }
    try:
        db.delete(attendance)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("Deleted attendance record %s", attendance_id)
    return snapshot
