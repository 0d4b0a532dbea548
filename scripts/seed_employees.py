"""
Insert a test employee directly through the store and print the collection.

Usage: python -m scripts.seed_employees
"""

import logging
import sys

from employee_api.core.config import ConfigurationError, get_settings, require_database_url
from employee_api.core.logging_config import configure_logging
from employee_api.repositories.employee_store import EmployeeStore
from employee_api.schemas.employee import EmployeeFields
from employee_api.db.session import connect

logger = logging.getLogger("scripts.seed_employees")

TEST_EMPLOYEE = EmployeeFields(
    name="Test Employee",
    location="Test City",
    position="Test Developer",
    salary=50000,
)


def seed(store: EmployeeStore, fields: EmployeeFields = TEST_EMPLOYEE):
    employee = store.create(fields)
    print("Employee added:", employee.id, employee.name, employee.position, employee.salary)

    print("All employees:")
    employees = store.list_all()
    for e in employees:
        print(e.id, e.name, e.location, e.position, e.salary)
    return employee, employees


def main():
    configure_logging()
    try:
        database_url = require_database_url(get_settings())
    except ConfigurationError:
        logger.critical(
            "DATABASE_URL is not set. Create a .env file or set the environment "
            "variable before running this script. See .env.example."
        )
        sys.exit(1)

    session_factory = connect(database_url)
    db = session_factory()
    try:
        seed(EmployeeStore(db))
    finally:
        db.close()
        session_factory.kw["bind"].dispose()

if __name__ == "__main__":
    main()
