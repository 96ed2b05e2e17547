from datetime import datetime, timezone

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base

EMPLOYEE_CODE_PREFIX = "EMP"


def format_employee_code(employee_pk: int) -> str:
    return f"{EMPLOYEE_CODE_PREFIX}{employee_pk:03d}"


class Employee(Base):
    __tablename__ = "employees"
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    # Filled from `id` in the creating transaction, see crud.employee.create_employee
    employee_code = Column(String(50), unique=True, nullable=True, index=True)
    full_name = Column(String(150), nullable=False)
    email = Column(String(150), unique=True, nullable=False)
    department = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    attendance_records = relationship(
        "Attendance",
        back_populates="employee",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Attendance(Base):
    __tablename__ = "attendance"

    __table_args__ = (
        UniqueConstraint("employee_id", "date", name="unique_employee_date"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    status = Column(String(20), nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    employee = relationship("Employee", back_populates="attendance_records")

    @property
    def employee_code(self):
        return self.employee.employee_code if self.employee else None

    @property
    def employee_name(self):
        return self.employee.full_name if self.employee else None
