from employee_api.models.employee import Employee

__all__ = ["Employee"]
