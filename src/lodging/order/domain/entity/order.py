from lodging.order.domain.value_object import ItemName, OrderId, Quantity
from lodging.person.domain.value_object import GuestId
from lodging.shared.domain import Entity, IsoDateTime, Money


class Order(Entity[OrderId]):
    """飲食・サービス注文エンティティ

    ゲストはIDで参照する。チェックアウト後も履歴として残る。
    """

    def __init__(
        self,
        id: OrderId,
        guest_id: GuestId,
        item: ItemName,
        quantity: Quantity,
        price: Money,
        placed_at: IsoDateTime,
    ) -> None:
        super().__init__(id)
        self._guest_id = guest_id
        self._item = item
        self._quantity = quantity
        self._price = price
        self._placed_at = placed_at

    @property
    def guest_id(self) -> GuestId:
        return self._guest_id

    @property
    def item(self) -> ItemName:
        return self._item

    @property
    def quantity(self) -> Quantity:
        return self._quantity

    @property
    def price(self) -> Money:
        return self._price

    @property
    def placed_at(self) -> IsoDateTime:
        return self._placed_at

    @property
    def total(self) -> Money:
        return self._price.multiply(self._quantity.value)
