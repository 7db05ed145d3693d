from .reservation import Reservation as Reservation
