from lodging.person.domain.value_object import GuestId
from lodging.room.domain.enum import RoomStatus
from lodging.room.domain.value_object import RoomNumber, RoomType
from lodging.shared.domain import Entity
from lodging.shared.domain.exception import (
    AlreadyBookedException,
    NotBookedException,
)


class Room(Entity[RoomNumber]):
    """客室エンティティ

    状態遷移: AVAILABLE --book--> BOOKED --checkout--> AVAILABLE
    occupant は BOOKED のときだけ設定される。
    """

    def __init__(self, id: RoomNumber, room_type: RoomType) -> None:
        super().__init__(id)
        self._room_type = room_type
        self._status = RoomStatus.AVAILABLE
        self._occupant: GuestId | None = None

    @property
    def number(self) -> RoomNumber:
        return self.id

    @property
    def room_type(self) -> RoomType:
        return self._room_type

    @property
    def status(self) -> RoomStatus:
        return self._status

    @property
    def occupant(self) -> GuestId | None:
        return self._occupant

    @property
    def is_booked(self) -> bool:
        return self._status == RoomStatus.BOOKED

    def is_occupied_by(self, guest_id: GuestId) -> bool:
        return self.is_booked and self._occupant == guest_id

    def book(self, guest_id: GuestId) -> None:
        """ゲストを入室させる"""
        if self._status == RoomStatus.BOOKED:
            raise AlreadyBookedException()
        self._status = RoomStatus.BOOKED
        self._occupant = guest_id

    def checkout(self) -> None:
        """チェックアウトして空室に戻す"""
        if self._status == RoomStatus.AVAILABLE:
            raise NotBookedException()
        self._status = RoomStatus.AVAILABLE
        self._occupant = None

    def describe(self) -> str:
        state = "Booked" if self.is_booked else "Available"
        return (
            f"Room Number: {self.number}, Room Type: {self.room_type}, "
            f"Booking Status: {state}"
        )
