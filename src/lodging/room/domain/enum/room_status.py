from enum import Enum


class RoomStatus(str, Enum):
    """客室ステータス"""

    AVAILABLE = "AVAILABLE"
    BOOKED = "BOOKED"
