from dataclasses import dataclass


@dataclass(frozen=True)
class OrderId:
    """注文ID（注文帳内の連番）"""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("OrderId must be positive")

    def __str__(self) -> str:
        return str(self.value)
