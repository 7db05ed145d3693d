from collections.abc import Callable
from decimal import Decimal

from lodging.order.domain.entity import Order
from lodging.order.domain.factory import OrderDetails, OrderFactory
from lodging.order.domain.repository import OrderRepository
from lodging.person.domain.value_object import GuestId
from lodging.room.applications.room_registry import RoomRegistry
from lodging.shared.domain import Currency, IsoDateTime
from lodging.shared.domain.exception import GuestNotCheckedInException
from lodging.shared.utils.logger import get_logger

logger = get_logger()


class OrderBook:
    """飲食・サービス注文のユースケース

    注文時点で予約済み客室に滞在しているゲストからのみ受け付ける。
    """

    def __init__(
        self,
        registry: RoomRegistry,
        repository: OrderRepository,
        factory: OrderFactory,
        currency: Currency,
        clock: Callable[[], IsoDateTime] = IsoDateTime.now,
    ) -> None:
        self._registry = registry
        self._repository = repository
        self._factory = factory
        self._currency = currency
        self._clock = clock

    def place_order(
        self,
        guest_id: GuestId,
        item: str,
        quantity: int,
        price: Decimal | float | int | str,
    ) -> Order:
        """注文を受け付ける

        Raises:
            GuestNotCheckedInException: ゲストがどの客室にも滞在していない
            ValueError: 品目・数量・価格が不正
        """
        if self._registry.find_room_occupied_by(guest_id) is None:
            logger.warning(
                "Order rejected - guest not checked in",
                extra={"guest_id": guest_id.value, "item": item},
            )
            raise GuestNotCheckedInException()

        order_details: OrderDetails = {
            "item": item,
            "quantity": quantity,
            "price_amount": price,
            "currency": self._currency,
        }
        order = self._factory.create(
            order_id=self._repository.next_id(),
            guest_id=guest_id,
            order_details=order_details,
            placed_at=self._clock(),
        )
        self._repository.save(order)
        logger.info(
            "Order placed",
            extra={
                "order_id": order.id.value,
                "guest_id": guest_id.value,
                "item": str(order.item),
                "quantity": order.quantity.value,
            },
        )
        return order

    def list_all(self) -> list[Order]:
        return self._repository.list_all()
