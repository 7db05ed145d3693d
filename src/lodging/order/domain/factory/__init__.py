from .order_factory import OrderDetails as OrderDetails
from .order_factory import OrderFactory as OrderFactory
