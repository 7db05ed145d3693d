from lodging.person.domain.value_object import GuestId
from lodging.shared.domain import Age, Entity, PersonName


class Guest(Entity[GuestId]):
    """ゲストエンティティ

    生成後は不変。同じ GuestId を持つ Guest は同一とみなす。
    """

    def __init__(self, id: GuestId, name: PersonName, age: Age) -> None:
        super().__init__(id)
        self._name = name
        self._age = age

    @property
    def name(self) -> PersonName:
        return self._name

    @property
    def age(self) -> Age:
        return self._age

    def describe(self) -> str:
        return f"Guest ID: {self.id}, Name: {self.name}, Age: {self.age}"
