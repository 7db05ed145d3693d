from lodging.person.domain.entity import Guest
from lodging.reservation.domain.value_object import ReservationId, StayDuration
from lodging.room.domain.value_object import RoomNumber
from lodging.shared.domain import Entity


class Reservation(Entity[ReservationId]):
    """予約エンティティ

    ゲスト情報は予約時点のスナップショット、客室は部屋番号で参照する。
    チェックアウト後も履歴として残る。
    """

    def __init__(
        self,
        id: ReservationId,
        guest: Guest,
        room_number: RoomNumber,
        duration: StayDuration,
    ) -> None:
        super().__init__(id)
        self._guest = guest
        self._room_number = room_number
        self._duration = duration

    @property
    def guest(self) -> Guest:
        return self._guest

    @property
    def room_number(self) -> RoomNumber:
        return self._room_number

    @property
    def duration(self) -> StayDuration:
        return self._duration
