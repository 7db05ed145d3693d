from abc import abstractmethod

from lodging.person.domain.entity import Employee
from lodging.person.domain.value_object import EmployeeId
from lodging.shared.domain import Repository


class EmployeeRepository(Repository[Employee, EmployeeId]):
    """従業員レポジトリのインターフェース"""

    @abstractmethod
    def save(self, employee: Employee) -> None:
        """従業員を保存する（同一 ID は上書き）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, employee_id: EmployeeId) -> Employee | None:
        """従業員IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Employee]:
        raise NotImplementedError
