from .entity import Employee as Employee
from .entity import Guest as Guest
from .repository import EmployeeRepository as EmployeeRepository
from .value_object import EmployeeId as EmployeeId
from .value_object import GuestId as GuestId
from .value_object import Position as Position
