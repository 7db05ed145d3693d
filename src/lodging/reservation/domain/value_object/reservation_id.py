from dataclasses import dataclass


@dataclass(frozen=True)
class ReservationId:
    """予約ID（台帳内の連番）"""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("ReservationId must be positive")

    def __str__(self) -> str:
        return str(self.value)
