from lodging.person.domain.value_object import EmployeeId, Position
from lodging.shared.domain import Age, Entity, PersonName


class Employee(Entity[EmployeeId]):
    """従業員エンティティ（役職のみ変更可能）"""

    def __init__(
        self,
        id: EmployeeId,
        name: PersonName,
        age: Age,
        position: Position,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._age = age
        self._position = position

    @property
    def name(self) -> PersonName:
        return self._name

    @property
    def age(self) -> Age:
        return self._age

    @property
    def position(self) -> Position:
        return self._position

    def change_position(self, position: Position) -> None:
        """役職を変更する"""
        self._position = position

    def describe(self) -> str:
        return (
            f"Employee ID: {self.id}, Position: {self.position}, "
            f"Name: {self.name}, Age: {self.age}"
        )
