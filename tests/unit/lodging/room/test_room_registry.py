import pytest

from lodging.person.domain.value_object import GuestId
from lodging.room.applications.room_registry import RoomRegistry
from lodging.room.domain.value_object import RoomNumber, RoomType
from lodging.room.infrastructure.in_memory_room_repository import (
    InMemoryRoomRepository,
)
from lodging.shared.domain.exception import (
    DuplicateRoomException,
    RoomNotFoundException,
)


class TestRoomRegistry:
    @pytest.fixture
    def registry(self):
        registry = RoomRegistry(repository=InMemoryRoomRepository())
        registry.add_room(RoomNumber(101), RoomType("Deluxe"))
        registry.add_room(RoomNumber(102), RoomType("Suite"))
        return registry

    def test_add_room_keeps_insertion_order(self, registry):
        numbers = [room.number.value for room in registry.list_all()]
        assert numbers == [101, 102]

    def test_duplicate_room_number_is_rejected(self, registry):
        with pytest.raises(DuplicateRoomException):
            registry.add_room(RoomNumber(101), RoomType("Standard"))
        assert len(registry.list_all()) == 2
        assert str(registry.find_room(RoomNumber(101)).room_type) == "Deluxe"

    def test_find_room_returns_none_when_absent(self, registry):
        assert registry.find_room(RoomNumber(999)) is None

    def test_get_room_raises_when_absent(self, registry):
        with pytest.raises(RoomNotFoundException, match="Room not found!"):
            registry.get_room(RoomNumber(999))

    def test_find_room_occupied_by(self, registry):
        room = registry.get_room(RoomNumber(102))
        registry.book(room, GuestId(7))
        assert registry.find_room_occupied_by(GuestId(7)) == room
        assert registry.find_room_occupied_by(GuestId(8)) is None

    def test_checkout_releases_occupant(self, registry):
        room = registry.get_room(RoomNumber(101))
        registry.book(room, GuestId(7))
        registry.checkout(room)
        assert registry.find_room_occupied_by(GuestId(7)) is None
