from lodging.reservation.domain.entity import Reservation
from lodging.reservation.domain.repository import ReservationRepository
from lodging.reservation.domain.value_object import ReservationId
from lodging.shared.domain.exception import DuplicateResourceException


class InMemoryReservationRepository(ReservationRepository):
    """list を使用した ReservationRepository の具象実装"""

    def __init__(self) -> None:
        self._reservations: list[Reservation] = []

    def next_id(self) -> ReservationId:
        return ReservationId(value=len(self._reservations) + 1)

    def save(self, reservation: Reservation) -> None:
        if self.find_by_id(reservation.id) is not None:
            raise DuplicateResourceException(
                f"Reservation already exists: {reservation.id}"
            )
        self._reservations.append(reservation)

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        for reservation in self._reservations:
            if reservation.id == reservation_id:
                return reservation
        return None

    def list_all(self) -> list[Reservation]:
        return list(self._reservations)
