import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError
from app.helpers.utils import parse_employee_identifier
from app.models.employee import Attendance, Employee, format_employee_code
from app.schemas.employee import EmployeeCreate

logger = logging.getLogger(__name__)


def list_employees(db: Session) -> List[Employee]:
    return db.query(Employee).order_by(Employee.id.asc()).all()

def find_employee(db: Session, identifier) -> Optional[Employee]:
    """Look up by public code or numeric id, None when nothing matches."""
    employee_pk = parse_employee_identifier(identifier)
    if employee_pk is None:
        return None
    return db.query(Employee).filter(Employee.id == employee_pk).first()

def get_employee(db: Session, identifier) -> Employee:
    employee = find_employee(db, identifier)
    if not employee:
        raise NotFoundError(f"Employee '{identifier}' not found", message="employee_not_found")
    return employee

def create_employee(db: Session, data: EmployeeCreate) -> Employee:
    if db.query(Employee.id).filter(Employee.email == data.email).first():
        raise ConflictError(f"Employee with email '{data.email}' already exists", message="employee_exists")

    employee = Employee(
        full_name=data.full_name,
        email=data.email,
        department=data.department.value,
    )
    try:
        db.add(employee)
        # need the generated id before the code can be derived from it
        db.flush()
        employee.employee_code = format_employee_code(employee.id)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Rejected duplicate employee email %s", data.email)
        raise ConflictError(f"Employee with email '{data.email}' already exists", message="employee_exists")
    except Exception:
        db.rollback()
        raise

    db.refresh(employee)
    logger.info("Created employee %s (%s)", employee.employee_code, employee.department)
    return employee

def delete_employee(db: Session, identifier) -> dict:
    """
    Delete an employee and every attendance entry that references it.

    Both deletes share one transaction; on failure neither is applied.
    Returns a snapshot of the removed employee since the instance is
    unusable after commit.
    """
    employee = get_employee(db, identifier)
    snapshot = {
        "id": employee.id,
        "_id": employee.id,
        "employee_id": employee.employee_code,
        "full_name": employee.full_name,
    }
    try:
        removed = (
            db.query(Attendance)
            .filter(Attendance.employee_id == employee.id)
            .delete(synchronize_session=False)
        )
        db.delete(employee)
        db.commit()
    except Exception:
        db.rollback()
        raise

    snapshot["removed_attendance"] = removed
    logger.info("Deleted employee %s with %d attendance records", snapshot["employee_id"], removed)
    return snapshot
