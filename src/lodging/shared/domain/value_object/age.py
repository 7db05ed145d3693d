from dataclasses import dataclass


@dataclass(frozen=True)
class Age:
    """年齢"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Age must be an integer: {self.value!r}")
        if self.value < 0:
            raise ValueError("Age cannot be negative")

    def __str__(self) -> str:
        return str(self.value)
