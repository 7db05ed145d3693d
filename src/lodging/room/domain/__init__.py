from .entity import Room as Room
from .enum import RoomStatus as RoomStatus
from .repository import RoomRepository as RoomRepository
from .value_object import RoomNumber as RoomNumber
from .value_object import RoomType as RoomType
