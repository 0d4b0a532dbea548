from __future__ import annotations

import math
from typing import Any

from fastapi import status

from employee_api.core.errors import ApiError
from employee_api.schemas.employee import EmployeeFields

TEXT_FIELDS = ("name", "location", "position")

FIELDS_REQUIRED_MESSAGE = "All fields (name, location, position, salary) are required"
ID_REQUIRED_MESSAGE = "Employee ID is required for update"
INVALID_SALARY_MESSAGE = "Salary must be a non-negative number"


def _bad_request(message: str) -> ApiError:
    return ApiError(status.HTTP_400_BAD_REQUEST, message)


def _parse_salary(raw: Any) -> float:
    """
    Accepts ints, floats and numeric strings (HTML forms send strings).
    Zero is a valid salary; only absence counts as missing.
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise _bad_request(FIELDS_REQUIRED_MESSAGE)

    # bool is an int subclass
    if isinstance(raw, bool):
        raise _bad_request(INVALID_SALARY_MESSAGE)

    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            raise _bad_request(INVALID_SALARY_MESSAGE)
    else:
        raise _bad_request(INVALID_SALARY_MESSAGE)

    if not math.isfinite(value) or value < 0:
        raise _bad_request(INVALID_SALARY_MESSAGE)
    return value


def validate_employee_fields(payload: dict[str, Any]) -> EmployeeFields:
    """
    Check the four business fields of a create/update body and return them
    trimmed. Raises a 400 ApiError before anything reaches the store.
    """
    values: dict[str, Any] = {}
    for key in TEXT_FIELDS:
        raw = payload.get(key)
        if not isinstance(raw, str) or not raw.strip():
            raise _bad_request(FIELDS_REQUIRED_MESSAGE)
        values[key] = raw.strip()

    values["salary"] = _parse_salary(payload.get("salary"))
    return EmployeeFields(**values)


def require_employee_id(payload: dict[str, Any]) -> str:
    raw = payload.get("_id")
    # Falsy ids (0, false, "", null) are absent, not lookups that miss
    if isinstance(raw, bool) or not raw or not str(raw).strip():
        raise _bad_request(ID_REQUIRED_MESSAGE)
    return str(raw).strip()
