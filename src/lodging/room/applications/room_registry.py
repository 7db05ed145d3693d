from lodging.person.domain.value_object import GuestId
from lodging.room.domain.entity import Room
from lodging.room.domain.repository import RoomRepository
from lodging.room.domain.value_object import RoomNumber, RoomType
from lodging.shared.domain.exception import (
    DuplicateRoomException,
    RoomNotFoundException,
)
from lodging.shared.utils.logger import get_logger

logger = get_logger()


class RoomRegistry:
    """客室台帳のユースケース

    客室の登録と予約状態（入室・チェックアウト）を管理する。
    """

    def __init__(self, repository: RoomRepository) -> None:
        self._repository = repository

    def add_room(self, room_number: RoomNumber, room_type: RoomType) -> Room:
        """空室として客室を登録する"""
        if self._repository.find_by_id(room_number) is not None:
            logger.warning(
                "Room number already registered",
                extra={"room_number": room_number.value},
            )
            raise DuplicateRoomException()
        room = Room(id=room_number, room_type=room_type)
        self._repository.save(room)
        logger.info(
            "Room added",
            extra={"room_number": room_number.value, "room_type": str(room_type)},
        )
        return room

    def find_room(self, room_number: RoomNumber) -> Room | None:
        return self._repository.find_by_id(room_number)

    def get_room(self, room_number: RoomNumber) -> Room:
        """客室を取得する（存在しなければ RoomNotFoundException）"""
        room = self._repository.find_by_id(room_number)
        if room is None:
            logger.warning("Room not found", extra={"room_number": room_number.value})
            raise RoomNotFoundException()
        return room

    def find_room_occupied_by(self, guest_id: GuestId) -> Room | None:
        """ゲストが滞在中の客室を探す"""
        for room in self._repository.list_all():
            if room.is_occupied_by(guest_id):
                return room
        return None

    def book(self, room: Room, guest_id: GuestId) -> None:
        room.book(guest_id)
        self._repository.save(room)
        logger.info(
            "Room booked",
            extra={"room_number": room.number.value, "guest_id": guest_id.value},
        )

    def checkout(self, room: Room) -> None:
        room.checkout()
        self._repository.save(room)
        logger.info("Room checked out", extra={"room_number": room.number.value})

    def list_all(self) -> list[Room]:
        return self._repository.list_all()
