from dataclasses import dataclass


@dataclass(frozen=True)
class RoomType:
    """客室タイプ（例: Deluxe, Suite）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Room type cannot be empty")

    def __str__(self) -> str:
        return self.value
