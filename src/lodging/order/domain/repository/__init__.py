from .order_repository import OrderRepository as OrderRepository
