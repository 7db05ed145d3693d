from abc import abstractmethod

from lodging.order.domain.entity import Order
from lodging.order.domain.value_object import OrderId
from lodging.shared.domain import Repository


class OrderRepository(Repository[Order, OrderId]):
    """注文帳レポジトリのインターフェース（追記のみ）"""

    @abstractmethod
    def next_id(self) -> OrderId:
        raise NotImplementedError

    @abstractmethod
    def save(self, order: Order) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, order_id: OrderId) -> Order | None:
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Order]:
        raise NotImplementedError
