from lodging.person.domain.entity import Employee
from lodging.person.domain.repository import EmployeeRepository
from lodging.person.domain.value_object import EmployeeId


class InMemoryEmployeeRepository(EmployeeRepository):
    """dict を使用した EmployeeRepository の具象実装"""

    def __init__(self) -> None:
        self._employees: dict[EmployeeId, Employee] = {}

    def save(self, employee: Employee) -> None:
        self._employees[employee.id] = employee

    def find_by_id(self, employee_id: EmployeeId) -> Employee | None:
        return self._employees.get(employee_id)

    def list_all(self) -> list[Employee]:
        return list(self._employees.values())
