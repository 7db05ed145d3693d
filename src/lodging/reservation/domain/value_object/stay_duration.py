from dataclasses import dataclass


@dataclass(frozen=True)
class StayDuration:
    """滞在日数（1日以上）"""

    days: int

    def __post_init__(self) -> None:
        if isinstance(self.days, bool) or not isinstance(self.days, int):
            raise ValueError(f"Stay duration must be whole days: {self.days!r}")
        if self.days < 1:
            raise ValueError("Stay duration must be at least 1 day")

    def __str__(self) -> str:
        return f"{self.days} days"
