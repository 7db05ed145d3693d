from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """従業員の役職"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Position cannot be empty")

    def __str__(self) -> str:
        return self.value
