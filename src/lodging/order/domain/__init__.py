from .entity import Order as Order
from .factory import OrderDetails as OrderDetails
from .factory import OrderFactory as OrderFactory
from .repository import OrderRepository as OrderRepository
from .value_object import ItemName as ItemName
from .value_object import OrderId as OrderId
from .value_object import Quantity as Quantity
