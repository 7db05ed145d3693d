from .room_status import RoomStatus as RoomStatus
