from dataclasses import dataclass


@dataclass(frozen=True)
class PersonName:
    """人名（ゲスト・従業員共通）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Name cannot be empty")
        if len(self.value) > 100:
            raise ValueError("Name is too long (max 100 characters)")

    def __str__(self) -> str:
        return self.value
