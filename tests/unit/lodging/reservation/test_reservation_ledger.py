import pytest

from lodging.reservation.applications.reservation_ledger import ReservationLedger
from lodging.reservation.domain.factory import ReservationFactory
from lodging.reservation.domain.value_object import ReservationId
from lodging.reservation.infrastructure.in_memory_reservation_repository import (
    InMemoryReservationRepository,
)
from lodging.room.applications.room_registry import RoomRegistry
from lodging.room.domain.value_object import RoomNumber, RoomType
from lodging.room.infrastructure.in_memory_room_repository import (
    InMemoryRoomRepository,
)
from lodging.shared.domain.exception import (
    AlreadyBookedException,
    NotBookedException,
    RoomNotFoundException,
)


@pytest.fixture
def registry():
    registry = RoomRegistry(repository=InMemoryRoomRepository())
    registry.add_room(RoomNumber(101), RoomType("Deluxe"))
    return registry


@pytest.fixture
def ledger(registry):
    return ReservationLedger(
        registry=registry,
        repository=InMemoryReservationRepository(),
        factory=ReservationFactory(),
    )


class TestReserve:
    def test_reserve_books_room_and_records_reservation(
        self, ledger, registry, create_guest
    ):
        guest = create_guest(guest_id=7)

        reservation = ledger.reserve(guest, RoomNumber(101), 3)

        assert reservation.id == ReservationId(1)
        assert reservation.guest == guest
        assert reservation.room_number == RoomNumber(101)
        assert reservation.duration.days == 3
        assert registry.find_room(RoomNumber(101)).occupant == guest.id
        assert ledger.list_all() == [reservation]

    def test_reserve_unknown_room_raises(self, ledger, create_guest):
        with pytest.raises(RoomNotFoundException):
            ledger.reserve(create_guest(), RoomNumber(999), 1)
        assert ledger.list_all() == []

    def test_reserve_booked_room_leaves_ledger_unchanged(
        self, ledger, registry, create_guest
    ):
        first = ledger.reserve(create_guest(guest_id=7), RoomNumber(101), 3)

        with pytest.raises(AlreadyBookedException):
            ledger.reserve(create_guest(guest_id=8), RoomNumber(101), 1)

        assert ledger.list_all() == [first]
        assert registry.find_room(RoomNumber(101)).occupant == first.guest.id

    def test_invalid_duration_does_not_book_room(self, ledger, registry, create_guest):
        with pytest.raises(ValueError):
            ledger.reserve(create_guest(), RoomNumber(101), 0)
        assert not registry.find_room(RoomNumber(101)).is_booked
        assert ledger.list_all() == []

    def test_failed_booking_never_reaches_repository(
        self, registry, create_guest, mock_repository
    ):
        mock_repository.next_id.return_value = ReservationId(1)
        ledger = ReservationLedger(
            registry=registry, repository=mock_repository, factory=ReservationFactory()
        )
        ledger.reserve(create_guest(guest_id=7), RoomNumber(101), 2)
        mock_repository.reset_mock()

        with pytest.raises(AlreadyBookedException):
            ledger.reserve(create_guest(guest_id=8), RoomNumber(101), 1)

        mock_repository.save.assert_not_called()
        mock_repository.next_id.assert_not_called()


class TestCheckout:
    def test_checkout_keeps_reservation_history(self, ledger, registry, create_guest):
        reservation = ledger.reserve(create_guest(), RoomNumber(101), 3)

        room = ledger.checkout(RoomNumber(101))

        assert not room.is_booked
        assert ledger.list_all() == [reservation]

    def test_checkout_unknown_room_raises(self, ledger):
        with pytest.raises(RoomNotFoundException):
            ledger.checkout(RoomNumber(999))

    def test_checkout_available_room_raises(self, ledger):
        with pytest.raises(NotBookedException):
            ledger.checkout(RoomNumber(101))
        assert ledger.list_all() == []

    def test_rebooking_after_checkout_appends_new_entry(self, ledger, create_guest):
        first = ledger.reserve(create_guest(guest_id=7), RoomNumber(101), 3)
        ledger.checkout(RoomNumber(101))
        second = ledger.reserve(create_guest(guest_id=8), RoomNumber(101), 1)

        assert first.id != second.id
        assert ledger.list_all() == [first, second]
