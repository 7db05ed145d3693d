from dataclasses import dataclass


@dataclass(frozen=True)
class GuestId:
    """ゲストID（ゲストの真の同一性キー）"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Guest ID must be an integer: {self.value!r}")

    def __str__(self) -> str:
        return str(self.value)
