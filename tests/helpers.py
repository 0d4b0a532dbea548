from datetime import datetime
from sqlalchemy.orm import Session

from employee_api.models.employee import Employee

API = "/api/employeelist"


def create_employee(
    db: Session,
    name: str = "Alice Smith",
    location: str = "Boston",
    position: str = "Engineer",
    salary: float = 100000,
) -> Employee:
    e = Employee(name=name, location=location, position=position, salary=salary)
    db.add(e)
    db.commit()
    db.refresh(e)
    return e


def employee_body(**overrides) -> dict:
    body = {"name": "Ana", "location": "NY", "position": "Eng", "salary": 90000}
    body.update(overrides)
    return body


def parse_ts(value: str) -> datetime:
    return datetime.fromisoformat(value)
