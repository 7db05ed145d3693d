from lodging.order.domain.entity import Order
from lodging.order.domain.repository import OrderRepository
from lodging.order.domain.value_object import OrderId
from lodging.shared.domain.exception import DuplicateResourceException


class InMemoryOrderRepository(OrderRepository):
    """list を使用した OrderRepository の具象実装"""

    def __init__(self) -> None:
        self._orders: list[Order] = []

    def next_id(self) -> OrderId:
        return OrderId(value=len(self._orders) + 1)

    def save(self, order: Order) -> None:
        if self.find_by_id(order.id) is not None:
            raise DuplicateResourceException(f"Order already exists: {order.id}")
        self._orders.append(order)

    def find_by_id(self, order_id: OrderId) -> Order | None:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def list_all(self) -> list[Order]:
        return list(self._orders)
