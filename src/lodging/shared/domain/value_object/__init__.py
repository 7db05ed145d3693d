from .age import Age
from .currency import Currency
from .iso_date_time import IsoDateTime
from .money import Money
from .person_name import PersonName

__all__ = ["Age", "Currency", "IsoDateTime", "Money", "PersonName"]
