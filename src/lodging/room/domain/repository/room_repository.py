from abc import abstractmethod

from lodging.room.domain.entity import Room
from lodging.room.domain.value_object import RoomNumber
from lodging.shared.domain import Repository


class RoomRepository(Repository[Room, RoomNumber]):
    """客室レポジトリのインターフェース"""

    @abstractmethod
    def save(self, room: Room) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, room_number: RoomNumber) -> Room | None:
        """部屋番号で検索する"""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Room]:
        raise NotImplementedError
