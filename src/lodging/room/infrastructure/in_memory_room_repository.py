from lodging.room.domain.entity import Room
from lodging.room.domain.repository import RoomRepository
from lodging.room.domain.value_object import RoomNumber


class InMemoryRoomRepository(RoomRepository):
    """dict を使用した RoomRepository の具象実装"""

    def __init__(self) -> None:
        self._rooms: dict[RoomNumber, Room] = {}

    def save(self, room: Room) -> None:
        self._rooms[room.id] = room

    def find_by_id(self, room_number: RoomNumber) -> Room | None:
        return self._rooms.get(room_number)

    def list_all(self) -> list[Room]:
        return list(self._rooms.values())
