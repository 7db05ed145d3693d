from lodging.person.domain.entity import Employee
from lodging.person.domain.repository import EmployeeRepository
from lodging.person.domain.value_object import EmployeeId, Position
from lodging.shared.domain.exception import (
    DuplicateEmployeeException,
    EmployeeNotFoundException,
)
from lodging.shared.utils.logger import get_logger

logger = get_logger()


class StaffRoster:
    """従業員名簿のユースケース"""

    def __init__(self, repository: EmployeeRepository) -> None:
        self._repository = repository

    def add_employee(self, employee: Employee) -> None:
        """従業員を登録する"""
        if self._repository.find_by_id(employee.id) is not None:
            logger.warning(
                "Employee already registered",
                extra={"employee_id": employee.id.value},
            )
            raise DuplicateEmployeeException()
        self._repository.save(employee)
        logger.info("Employee added", extra={"employee_id": employee.id.value})

    def find_employee(self, employee_id: EmployeeId) -> Employee | None:
        return self._repository.find_by_id(employee_id)

    def update_position(self, employee_id: EmployeeId, position: Position) -> Employee:
        """役職を変更する"""
        employee = self._repository.find_by_id(employee_id)
        if employee is None:
            logger.warning(
                "Employee not found", extra={"employee_id": employee_id.value}
            )
            raise EmployeeNotFoundException()
        employee.change_position(position)
        self._repository.save(employee)
        logger.info(
            "Employee position updated",
            extra={"employee_id": employee_id.value, "position": str(position)},
        )
        return employee

    def list_all(self) -> list[Employee]:
        return self._repository.list_all()
