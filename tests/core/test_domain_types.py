"""Domain Types — verifies identity type, constraints and the City enum."""

from customer_api.core.domain_types import (
    City, CustomerId, FIRST_NAME_MIN_LENGTH, LAST_NAME_MIN_LENGTH,
)


def test_customer_id_wraps_int():
    assert CustomerId(7) == 7


def test_name_length_constraints():
    assert FIRST_NAME_MIN_LENGTH == 3
    assert LAST_NAME_MIN_LENGTH == 2


def test_city_has_exactly_four_members():
    assert City.values() == ["Amsterdam", "Rotterdam", "The Hague", "Eindhoven"]


def test_city_compares_equal_to_its_value():
    assert City.THE_HAGUE == "The Hague"
    assert City("Rotterdam") is City.ROTTERDAM
