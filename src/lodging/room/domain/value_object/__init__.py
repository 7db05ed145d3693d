from .room_number import RoomNumber as RoomNumber
from .room_type import RoomType as RoomType
