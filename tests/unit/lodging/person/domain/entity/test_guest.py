from lodging.person.domain.entity import Employee, Guest
from lodging.person.domain.value_object import EmployeeId, GuestId, Position
from lodging.shared.domain import Age, PersonName


class TestGuest:
    def test_guests_with_same_id_are_equal(self, create_guest):
        assert create_guest(guest_id=7, name="Asha") == create_guest(
            guest_id=7, name="Ravi"
        )

    def test_guests_with_different_ids_are_not_equal(self, create_guest):
        assert create_guest(guest_id=7) != create_guest(guest_id=8)

    def test_guest_is_not_equal_to_employee_with_same_number(self):
        guest = Guest(id=GuestId(1), name=PersonName("Asha"), age=Age(30))
        employee = Employee(
            id=EmployeeId(1),
            name=PersonName("Asha"),
            age=Age(30),
            position=Position("Chef"),
        )
        assert guest != employee

    def test_describe(self, create_guest):
        assert create_guest().describe() == "Guest ID: 7, Name: Asha, Age: 30"


class TestEmployee:
    def test_change_position(self):
        employee = Employee(
            id=EmployeeId(1),
            name=PersonName("Meera"),
            age=Age(41),
            position=Position("Chef"),
        )
        employee.change_position(Position("Manager"))
        assert employee.position == Position("Manager")
        assert employee.describe() == (
            "Employee ID: 1, Position: Manager, Name: Meera, Age: 41"
        )
