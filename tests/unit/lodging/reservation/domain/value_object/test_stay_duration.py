import pytest

from lodging.reservation.domain.value_object import ReservationId, StayDuration


class TestStayDuration:
    def test_single_day_stay(self):
        assert StayDuration(days=1).days == 1

    @pytest.mark.parametrize("days", [0, -3])
    def test_non_positive_duration_raises_error(self, days):
        with pytest.raises(ValueError, match="at least 1 day"):
            StayDuration(days=days)

    def test_fractional_duration_raises_error(self):
        with pytest.raises(ValueError, match="whole days"):
            StayDuration(days=1.5)

    def test_str(self):
        assert str(StayDuration(days=3)) == "3 days"


class TestReservationId:
    def test_zero_raises_error(self):
        with pytest.raises(ValueError):
            ReservationId(value=0)
