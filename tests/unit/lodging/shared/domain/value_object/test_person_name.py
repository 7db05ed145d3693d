import pytest

from lodging.shared.domain import Age, PersonName


class TestPersonName:
    def test_valid_name(self):
        assert str(PersonName("Asha")) == "Asha"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_name_raises_error(self, value):
        with pytest.raises(ValueError, match="Name cannot be empty"):
            PersonName(value)

    def test_too_long_name_raises_error(self):
        with pytest.raises(ValueError, match="too long"):
            PersonName("a" * 101)


class TestAge:
    def test_zero_is_allowed(self):
        assert Age(0).value == 0

    def test_negative_age_raises_error(self):
        with pytest.raises(ValueError, match="Age cannot be negative"):
            Age(-1)

    def test_bool_is_rejected(self):
        with pytest.raises(ValueError):
            Age(True)
