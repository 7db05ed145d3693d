from .employee_repository import EmployeeRepository as EmployeeRepository
