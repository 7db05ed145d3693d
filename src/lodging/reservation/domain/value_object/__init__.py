from .reservation_id import ReservationId as ReservationId
from .stay_duration import StayDuration as StayDuration
