from dataclasses import dataclass


@dataclass(frozen=True)
class Quantity:
    """注文数量（1以上）"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Quantity must be an integer: {self.value!r}")
        if self.value < 1:
            raise ValueError("Quantity must be at least 1")

    def __str__(self) -> str:
        return str(self.value)
