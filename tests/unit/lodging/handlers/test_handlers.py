from unittest.mock import MagicMock

from lodging.handlers import handlers


def _reserve(directory, guest_id=7, room_number=101, days=3):
    return handlers.make_reservation(
        directory,
        {
            "name": "Asha",
            "age": 30,
            "guest_id": guest_id,
            "room_number": room_number,
            "duration_days": days,
        },
    )


class TestMutationHandlers:
    def test_add_room(self, directory):
        response = handlers.add_room(
            directory, {"room_number": 101, "room_type": "Deluxe"}
        )
        assert response["status"] == "success"
        assert response["message"] == "Room Added Successfully!!"
        assert response["data"]["status"] == "AVAILABLE"

    def test_make_reservation_returns_summary(self, directory):
        handlers.add_room(directory, {"room_number": 101, "room_type": "Deluxe"})

        response = _reserve(directory)

        assert response["status"] == "success"
        assert response["message"] == "Reservation successful!"
        assert response["data"]["guest"]["guest_id"] == 7
        assert response["data"]["room"]["occupant_guest_id"] == 7
        assert response["data"]["duration_days"] == 3

    def test_already_booked_is_reported_verbatim(self, directory):
        handlers.add_room(directory, {"room_number": 101, "room_type": "Deluxe"})
        _reserve(directory, guest_id=7)

        response = _reserve(directory, guest_id=8)

        assert response == {
            "status": "error",
            "error_kind": "AlreadyBooked",
            "message": "Room is already booked!",
        }

    def test_room_not_found(self, directory):
        response = handlers.checkout_room(directory, {"room_number": 404})
        assert response["error_kind"] == "RoomNotFound"
        assert response["message"] == "Room not found!"

    def test_not_booked(self, directory):
        handlers.add_room(directory, {"room_number": 101, "room_type": "Deluxe"})
        response = handlers.checkout_room(directory, {"room_number": 101})
        assert response["error_kind"] == "NotBooked"

    def test_employee_not_found(self, directory):
        response = handlers.update_employee_position(
            directory, {"employee_id": 1, "new_position": "Manager"}
        )
        assert response["error_kind"] == "EmployeeNotFound"

    def test_guest_not_checked_in(self, directory):
        response = handlers.add_order(
            directory, {"guest_id": 7, "item": "Coffee", "quantity": 2, "price": 150.0}
        )
        assert response["error_kind"] == "GuestNotCheckedIn"

    def test_invalid_input(self, directory):
        response = handlers.add_room(
            directory, {"room_number": "abc", "room_type": "Deluxe"}
        )
        assert response["status"] == "error"
        assert response["error_kind"] == "InvalidInput"
        assert response["message"].startswith("Invalid input.")

    def test_unexpected_failure_is_reported_without_raising(self):
        directory = MagicMock()
        directory.list_rooms.side_effect = RuntimeError("boom")

        response = handlers.list_rooms(directory)

        assert response == {
            "status": "error",
            "error_kind": "UnknownError",
            "message": "An unknown error occurred.",
        }


class TestListingHandlers:
    def test_list_orders_in_insertion_order(self, directory):
        handlers.add_room(directory, {"room_number": 101, "room_type": "Deluxe"})
        _reserve(directory)
        for item in ("Coffee", "Tea"):
            handlers.add_order(
                directory, {"guest_id": 7, "item": item, "quantity": 1, "price": "40"}
            )

        response = handlers.list_orders(directory)

        assert [o["item"] for o in response["data"]] == ["Coffee", "Tea"]
        assert response["data"][0]["placed_at"] == "2024-01-01T10:00:00+00:00"

    def test_list_reservations_includes_room(self, directory):
        handlers.add_room(directory, {"room_number": 101, "room_type": "Deluxe"})
        _reserve(directory)

        response = handlers.list_reservations(directory)

        assert response["data"][0]["room"]["room_type"] == "Deluxe"

    def test_hotel_details(self, directory):
        handlers.add_employee(
            directory,
            {"name": "Meera", "age": 41, "employee_id": 1, "position": "Chef"},
        )

        response = handlers.hotel_details(directory)

        assert response["data"]["hotel_name"] == "Test Hotel"
        assert response["data"]["employees"][0]["position"] == "Chef"
        assert response["data"]["rooms"] == []
