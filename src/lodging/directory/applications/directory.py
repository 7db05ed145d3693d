from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal

from lodging.config import Settings, load_settings
from lodging.order.applications.order_book import OrderBook
from lodging.order.domain.entity import Order
from lodging.order.domain.factory import OrderFactory
from lodging.order.infrastructure.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from lodging.person.applications.staff_roster import StaffRoster
from lodging.person.domain.entity import Employee, Guest
from lodging.person.domain.value_object import EmployeeId, GuestId, Position
from lodging.person.infrastructure.in_memory_employee_repository import (
    InMemoryEmployeeRepository,
)
from lodging.reservation.applications.reservation_ledger import ReservationLedger
from lodging.reservation.domain.entity import Reservation
from lodging.reservation.domain.factory import ReservationFactory
from lodging.reservation.infrastructure.in_memory_reservation_repository import (
    InMemoryReservationRepository,
)
from lodging.room.applications.room_registry import RoomRegistry
from lodging.room.domain.entity import Room
from lodging.room.domain.value_object import RoomNumber, RoomType
from lodging.room.infrastructure.in_memory_room_repository import (
    InMemoryRoomRepository,
)
from lodging.shared.domain import Age, Currency, IsoDateTime, PersonName


@dataclass(frozen=True)
class DirectorySnapshot:
    """施設全体の一覧（表示用）"""

    hotel_name: str
    rooms: list[Room]
    employees: list[Employee]
    reservations: list[Reservation]
    orders: list[Order]


class Directory:
    """施設の記録を束ねる集約

    - 変更操作は全て成功するか、どのコレクションも変更しない
    - 単一スレッドからの逐次呼び出しを前提とする
    """

    def __init__(
        self,
        hotel_name: str,
        registry: RoomRegistry,
        ledger: ReservationLedger,
        order_book: OrderBook,
        roster: StaffRoster,
    ) -> None:
        self._hotel_name = hotel_name
        self._registry = registry
        self._ledger = ledger
        self._order_book = order_book
        self._roster = roster

    @classmethod
    def create(
        cls,
        settings: Settings | None = None,
        clock: Callable[[], IsoDateTime] = IsoDateTime.now,
    ) -> "Directory":
        """インメモリのレポジトリで Directory を組み立てる

        Raises:
            ValueError: 設定の通貨コードが不正
        """
        settings = settings or load_settings()
        currency = Currency(settings.currency_code)
        registry = RoomRegistry(repository=InMemoryRoomRepository())
        return cls(
            hotel_name=settings.hotel_name,
            registry=registry,
            ledger=ReservationLedger(
                registry=registry,
                repository=InMemoryReservationRepository(),
                factory=ReservationFactory(),
            ),
            order_book=OrderBook(
                registry=registry,
                repository=InMemoryOrderRepository(),
                factory=OrderFactory(),
                currency=currency,
                clock=clock,
            ),
            roster=StaffRoster(repository=InMemoryEmployeeRepository()),
        )

    @property
    def hotel_name(self) -> str:
        return self._hotel_name

    def add_room(self, room_number: int, room_type: str) -> Room:
        return self._registry.add_room(RoomNumber(room_number), RoomType(room_type))

    def add_employee(
        self, name: str, age: int, employee_id: int, position: str
    ) -> Employee:
        employee = Employee(
            id=EmployeeId(employee_id),
            name=PersonName(name),
            age=Age(age),
            position=Position(position),
        )
        self._roster.add_employee(employee)
        return employee

    def make_reservation(
        self,
        name: str,
        age: int,
        guest_id: int,
        room_number: int,
        duration_days: int,
    ) -> Reservation:
        guest = Guest(id=GuestId(guest_id), name=PersonName(name), age=Age(age))
        return self._ledger.reserve(guest, RoomNumber(room_number), duration_days)

    def checkout_room(self, room_number: int) -> Room:
        return self._ledger.checkout(RoomNumber(room_number))

    def update_employee_position(self, employee_id: int, new_position: str) -> Employee:
        return self._roster.update_position(
            EmployeeId(employee_id), Position(new_position)
        )

    def add_order(
        self,
        guest_id: int,
        item: str,
        quantity: int,
        price: Decimal | float | int | str,
    ) -> Order:
        return self._order_book.place_order(GuestId(guest_id), item, quantity, price)

    def find_room(self, room_number: int) -> Room | None:
        return self._registry.find_room(RoomNumber(room_number))

    def find_employee(self, employee_id: int) -> Employee | None:
        return self._roster.find_employee(EmployeeId(employee_id))

    def list_rooms(self) -> list[Room]:
        return self._registry.list_all()

    def list_employees(self) -> list[Employee]:
        return self._roster.list_all()

    def list_reservations(self) -> list[Reservation]:
        return self._ledger.list_all()

    def list_orders(self) -> list[Order]:
        return self._order_book.list_all()

    def snapshot(self) -> DirectorySnapshot:
        return DirectorySnapshot(
            hotel_name=self._hotel_name,
            rooms=self.list_rooms(),
            employees=self.list_employees(),
            reservations=self.list_reservations(),
            orders=self.list_orders(),
        )
