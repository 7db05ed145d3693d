from .room_repository import RoomRepository as RoomRepository
