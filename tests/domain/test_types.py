"""Tests for the Weekday and Month enumerations."""

import pytest

from civtime.domain.types import Month, Weekday


def test_weekday_members() -> None:
    assert [d.value for d in Weekday] == ["mon", "tue", "wed", "thu", "fri", "sat", "sun"]
    for member in Weekday:
        assert member == member.value
        assert isinstance(member, str)


def test_month_members() -> None:
    assert len(Month) == 12
    assert Month.JAN == "jan"
    assert Month.DEC == "dec"


class TestMonthNumbers:
    @pytest.mark.parametrize("number", range(1, 13))
    def test_from_number_round_trips(self, number: int) -> None:
        assert Month.from_number(number).number == number

    def test_january_is_one(self) -> None:
        assert Month.from_number(1) is Month.JAN
        assert Month.JAN.number == 1

    @pytest.mark.parametrize("number", [0, 13, -1])
    def test_out_of_range(self, number: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Month.from_number(number)
