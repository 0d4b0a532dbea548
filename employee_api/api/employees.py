import asyncio
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import sessionmaker
from starlette.concurrency import run_in_threadpool

from employee_api.core.config import Settings, get_settings
from employee_api.core.errors import ApiError, not_found, store_errors
from employee_api.core.validation import require_employee_id, validate_employee_fields
from employee_api.db.session import get_session_factory
from employee_api.models.employee import Employee
from employee_api.repositories.employee_store import EmployeeStore, get_employee_store, open_employee_store
from employee_api.schemas.employee import EmployeeOut, EmployeeResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/employeelist", tags=["employees"])


def employee_to_out(e: Employee) -> EmployeeOut:
    return EmployeeOut(
        id=str(e.id),
        name=e.name,
        location=e.location,
        position=e.position,
        salary=e.salary,
        created_at=e.created_at,
        updated_at=e.updated_at,
    )


@router.get("", response_model=list[EmployeeOut])
async def list_employees(
    session_factory: sessionmaker = Depends(get_session_factory),
    settings: Settings = Depends(get_settings),
):
    """
    Return every employee as a bare array (no envelope).

    The query is abandoned after LIST_QUERY_TIMEOUT_SECONDS. It runs on a
    session owned by the worker thread, so a query that is still running
    when the request gives up returns its connection once it finishes.
    """
    timeout = settings.LIST_QUERY_TIMEOUT_SECONDS

    def _query():
        with open_employee_store(session_factory) as store:
            return store.list_all(timeout=timeout)

    with store_errors("Error fetching employees"):
        try:
            employees = await asyncio.wait_for(run_in_threadpool(_query), timeout=timeout)
        except asyncio.TimeoutError:
            raise ApiError(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Error fetching employees",
                error=f"List query exceeded {timeout:g}s",
            )

    logger.info("Found employees: %d", len(employees))
    return [employee_to_out(e) for e in employees]


@router.get("/{employee_id}", response_model=EmployeeResponse, response_model_exclude_none=True)
def get_employee(
    employee_id: str,
    store: EmployeeStore = Depends(get_employee_store),
):
    with store_errors("Error fetching employee"):
        employee = store.get(employee_id)
    if not employee:
        raise not_found()
    return EmployeeResponse(data=employee_to_out(employee))


@router.post(
    "",
    response_model=EmployeeResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_employee(
    payload: dict[str, Any] = Body(...),
    store: EmployeeStore = Depends(get_employee_store),
):
    """
    Body: {name, location, position, salary}. Validated before the store is touched.
    """
    fields = validate_employee_fields(payload)
    with store_errors("Error creating employee"):
        employee = store.create(fields)
    return EmployeeResponse(message="Employee created successfully", data=employee_to_out(employee))


@router.delete("/{employee_id}", response_model=EmployeeResponse, response_model_exclude_none=True)
def delete_employee(
    employee_id: str,
    store: EmployeeStore = Depends(get_employee_store),
):
    with store_errors("Error deleting employee"):
        employee = store.delete(employee_id)
    if not employee:
        raise not_found()
    return EmployeeResponse(message="Employee deleted successfully", data=employee_to_out(employee))


@router.put("", response_model=EmployeeResponse, response_model_exclude_none=True)
def update_employee(
    payload: dict[str, Any] = Body(...),
    store: EmployeeStore = Depends(get_employee_store),
):
    """
    Body: {_id, name, location, position, salary}. The target is addressed by
    the _id in the body, not the path.
    """
    employee_id = require_employee_id(payload)
    fields = validate_employee_fields(payload)
    with store_errors("Error updating employee"):
        employee = store.update(employee_id, fields)
    if not employee:
        raise not_found()
    return EmployeeResponse(message="Employee updated successfully", data=employee_to_out(employee))
