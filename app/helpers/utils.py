from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from fastapi import Request

from app.core.config import settings
from app.models.employee import EMPLOYEE_CODE_PREFIX


def get_lang_from_request(request: Request):
    return request.headers.get("Accept-Language", "en")

def get_today(tz_name: str = None) -> date:
    """Current calendar date in the configured timezone."""
    return datetime.now(ZoneInfo(tz_name or settings.TIMEZONE)).date()


# signed 32-bit INTEGER, the narrowest id column we run on (PostgreSQL)
MAX_DB_INTEGER = 2 ** 31 - 1


def parse_record_id(value) -> Optional[int]:
    """Positive id within the database integer range, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    else:
        value = str(value or "").strip()
        # "²".isdigit() is True but int() rejects it
        if not (value.isascii() and value.isdigit()):
            return None
        number = int(value)
    if 0 < number <= MAX_DB_INTEGER:
        return number
    return None

def parse_employee_identifier(identifier) -> Optional[int]:
    """
    Resolve an employee reference to its surrogate id.

    Accepts the public code ("EMP001", any case, any zero padding) or the
    numeric id. Returns None when the value can be neither.
    """
    if isinstance(identifier, str):
        value = identifier.strip()
        if value.upper().startswith(EMPLOYEE_CODE_PREFIX):
            return parse_record_id(value[len(EMPLOYEE_CODE_PREFIX):])
        return parse_record_id(value)
    return parse_record_id(identifier)
