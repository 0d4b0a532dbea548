import uuid
from contextlib import contextmanager
from typing import Iterator, Optional, List

from fastapi import Depends
from sqlalchemy import select, text
from sqlalchemy.orm import Session, sessionmaker

from employee_api.db.session import get_db
from employee_api.models.employee import Employee, utcnow
from employee_api.schemas.employee import EmployeeFields


def _parse_id(employee_id: str) -> Optional[uuid.UUID]:
    # Ids that are not well formed cannot exist in the store
    try:
        return uuid.UUID(str(employee_id))
    except ValueError:
        return None


class EmployeeStore:
    """Persistence operations for employee records, bound to one session"""

    def __init__(self, session: Session):
        self.session = session

    def list_all(self, timeout: Optional[float] = None) -> List[Employee]:
        """
        Whole collection in insertion order. On PostgreSQL the query is also
        bounded server side by `timeout` seconds.
        """
        if timeout and self.session.get_bind().dialect.name == "postgresql":
            # Scoped to the current transaction only
            self.session.execute(text(f"SET LOCAL statement_timeout = {int(timeout * 1000)}"))
        result = self.session.execute(select(Employee).order_by(Employee.created_at.asc()))
        return list(result.scalars().all())

    def get(self, employee_id: str) -> Optional[Employee]:
        key = _parse_id(employee_id)
        if key is None:
            return None
        return self.session.get(Employee, key)

    def create(self, fields: EmployeeFields) -> Employee:
        employee = Employee(**fields.model_dump())
        self.session.add(employee)
        self.session.commit()
        self.session.refresh(employee)
        return employee

    def delete(self, employee_id: str) -> Optional[Employee]:
        """Hard delete. Returns the removed record, or None if it did not exist."""
        employee = self.get(employee_id)
        if employee is None:
            return None
        self.session.delete(employee)
        self.session.commit()
        return employee

    def update(self, employee_id: str, fields: EmployeeFields) -> Optional[Employee]:
        """Replace all four business fields at once. Last write wins."""
        employee = self.get(employee_id)
        if employee is None:
            return None
        for key, value in fields.model_dump().items():
            setattr(employee, key, value)
        employee.updated_at = utcnow()
        self.session.commit()
        self.session.refresh(employee)
        return employee


def get_employee_store(db: Session = Depends(get_db)) -> EmployeeStore:
    return EmployeeStore(db)


@contextmanager
def open_employee_store(session_factory: sessionmaker) -> Iterator[EmployeeStore]:
    """
    Store on a session of its own, closed on exit. Used for work that may
    outlive the request that started it.
    """
    db = session_factory()
    try:
        yield EmployeeStore(db)
    finally:
        db.close()
