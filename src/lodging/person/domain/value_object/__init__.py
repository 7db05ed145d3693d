from .employee_id import EmployeeId as EmployeeId
from .guest_id import GuestId as GuestId
from .position import Position as Position
