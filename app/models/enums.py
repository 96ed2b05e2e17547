import enum

class DepartmentEnum(str, enum.Enum):
    ENGINEERING = "Engineering"
    HR = "HR"
    SALES = "Sales"
    MARKETING = "Marketing"
    FINANCE = "Finance"
    OPERATIONS = "Operations"
    IT = "IT"
    OTHER = "Other"

class AttendanceStatusEnum(str, enum.Enum):
    PRESENT = "Present"
    ABSENT = "Absent"
