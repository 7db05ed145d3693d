from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報を含む）

    Value Object として不変性を保証。
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not self.amount.is_finite():
            raise ValueError(f"Invalid amount: {self.amount}")
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def multiply(self, times: int) -> "Money":
        """数量を掛けた金額を返す"""
        return Money(amount=self.amount * times, currency=self.currency)

    @classmethod
    def of(cls, amount: Decimal | float | int | str, currency: Currency) -> "Money":
        """float 等から Money を生成（str 経由で丸め誤差を避ける）"""
        try:
            value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        except ArithmeticError as e:
            raise ValueError(f"Invalid amount: {amount}") from e
        return cls(amount=value, currency=currency)
