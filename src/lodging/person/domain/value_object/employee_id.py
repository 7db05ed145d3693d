from dataclasses import dataclass


@dataclass(frozen=True)
class EmployeeId:
    """従業員ID"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Employee ID must be an integer: {self.value!r}")

    def __str__(self) -> str:
        return str(self.value)
