from .entity import Reservation as Reservation
from .factory import ReservationFactory as ReservationFactory
from .repository import ReservationRepository as ReservationRepository
from .value_object import ReservationId as ReservationId
from .value_object import StayDuration as StayDuration
