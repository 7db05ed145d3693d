from lodging.person.domain.entity import Guest
from lodging.reservation.domain.entity import Reservation
from lodging.reservation.domain.value_object import ReservationId, StayDuration
from lodging.room.domain.value_object import RoomNumber


class ReservationFactory:
    """予約エンティティを生成するFactory"""

    def create(
        self,
        reservation_id: ReservationId,
        guest: Guest,
        room_number: RoomNumber,
        duration: StayDuration,
    ) -> Reservation:
        """新規予約のエンティティを作成する"""
        return Reservation(
            id=reservation_id,
            guest=guest,
            room_number=room_number,
            duration=duration,
        )
