from employee_api.repositories.employee_store import EmployeeStore
from scripts.seed_employees import TEST_EMPLOYEE, seed
from tests.helpers import create_employee


def test_seed_adds_test_employee_and_lists(db_session, capsys):
    create_employee(db_session, "Existing Person")

    employee, employees = seed(EmployeeStore(db_session))

    assert employee.name == TEST_EMPLOYEE.name
    assert employee.salary == 50000
    assert [e.name for e in employees] == ["Existing Person", "Test Employee"]
    out = capsys.readouterr().out
    assert "Employee added:" in out
    assert "All employees:" in out
