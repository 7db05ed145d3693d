from lodging.person.domain.entity import Guest
from lodging.reservation.domain.entity import Reservation
from lodging.reservation.domain.factory import ReservationFactory
from lodging.reservation.domain.repository import ReservationRepository
from lodging.reservation.domain.value_object import StayDuration
from lodging.room.applications.room_registry import RoomRegistry
from lodging.room.domain.entity import Room
from lodging.room.domain.value_object import RoomNumber
from lodging.shared.utils.logger import get_logger

logger = get_logger()


class ReservationLedger:
    """予約台帳のユースケース

    客室の状態遷移は RoomRegistry に委譲する。予約レコードは
    客室の入室が成功した後にのみ台帳へ追記され、削除されない。
    """

    def __init__(
        self,
        registry: RoomRegistry,
        repository: ReservationRepository,
        factory: ReservationFactory,
    ) -> None:
        self._registry = registry
        self._repository = repository
        self._factory = factory

    def reserve(
        self, guest: Guest, room_number: RoomNumber, duration_days: int
    ) -> Reservation:
        """ゲストを客室に入室させ、予約を記録する

        Raises:
            RoomNotFoundException: 客室が存在しない
            AlreadyBookedException: 客室が予約済み
            ValueError: 滞在日数が不正
        """
        room = self._registry.get_room(room_number)
        duration = StayDuration(days=duration_days)

        self._registry.book(room, guest.id)

        reservation = self._factory.create(
            reservation_id=self._repository.next_id(),
            guest=guest,
            room_number=room_number,
            duration=duration,
        )
        self._repository.save(reservation)
        logger.info(
            "Reservation recorded",
            extra={
                "reservation_id": reservation.id.value,
                "room_number": room_number.value,
                "guest_id": guest.id.value,
                "duration_days": duration.days,
            },
        )
        return reservation

    def checkout(self, room_number: RoomNumber) -> Room:
        """客室をチェックアウトする（予約レコードは履歴として残す）"""
        room = self._registry.get_room(room_number)
        self._registry.checkout(room)
        return room

    def list_all(self) -> list[Reservation]:
        return self._repository.list_all()
