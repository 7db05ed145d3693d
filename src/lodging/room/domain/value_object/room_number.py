from dataclasses import dataclass


@dataclass(frozen=True)
class RoomNumber:
    """部屋番号（客室の同一性キー）"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Room number must be an integer: {self.value!r}")

    def __str__(self) -> str:
        return str(self.value)
