from .item_name import ItemName as ItemName
from .order_id import OrderId as OrderId
from .quantity import Quantity as Quantity
