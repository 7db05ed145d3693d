from abc import abstractmethod

from lodging.reservation.domain.entity import Reservation
from lodging.reservation.domain.value_object import ReservationId
from lodging.shared.domain import Repository


class ReservationRepository(Repository[Reservation, ReservationId]):
    """予約台帳レポジトリのインターフェース（追記のみ）"""

    @abstractmethod
    def next_id(self) -> ReservationId:
        """次に割り当てる予約IDを払い出す"""
        raise NotImplementedError

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Reservation]:
        raise NotImplementedError
