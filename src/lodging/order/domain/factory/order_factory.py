from decimal import Decimal
from typing import TypedDict

from lodging.order.domain.entity import Order
from lodging.order.domain.value_object import ItemName, OrderId, Quantity
from lodging.person.domain.value_object import GuestId
from lodging.shared.domain import Currency, IsoDateTime, Money


class OrderDetails(TypedDict):
    """注文の入力データ構造（TypedDict）"""

    item: str
    quantity: int
    price_amount: Decimal | float | int | str
    currency: Currency


class OrderFactory:
    """注文ファクトリ"""

    def create(
        self,
        order_id: OrderId,
        guest_id: GuestId,
        order_details: OrderDetails,
        placed_at: IsoDateTime,
    ) -> Order:
        """新規注文エンティティを生成する"""
        price = Money.of(
            order_details["price_amount"],
            currency=order_details["currency"],
        )
        return Order(
            id=order_id,
            guest_id=guest_id,
            item=ItemName(order_details["item"]),
            quantity=Quantity(order_details["quantity"]),
            price=price,
            placed_at=placed_at,
        )
