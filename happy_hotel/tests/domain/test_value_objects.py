from datetime import date

import pytest

from happy_hotel.domain.exceptions import (
    BusinessException,
    DomainException,
    NotFoundException,
    ValidationException,
)
from happy_hotel.domain.value_objects import Booking, BookingRequest, Room


def test_booking_request_is_mutable_and_counts_nights():
    request = BookingRequest(
        room_id=None,
        check_in=date(2021, 6, 1),
        check_out=date(2021, 6, 8),
        person_count=3,
    )

    assert request.nights == 7
    assert request.prepaid is False

    request.room_id = "2.01"
    assert request.room_id == "2.01"


def test_equal_requests_compare_equal():
    first = BookingRequest("1.01", date(2021, 6, 1), date(2021, 6, 2), 2, True)
    second = BookingRequest("1.01", date(2021, 6, 1), date(2021, 6, 2), 2, True)
    assert first == second


def test_room_requires_positive_capacity():
    with pytest.raises(ValueError, match="Вместимость номера должна быть положительной."):
        Room(room_id="1.01", capacity=0)


def test_room_is_immutable():
    room = Room(room_id="1.01", capacity=2)
    with pytest.raises(AttributeError):
        room.capacity = 5  # type: ignore[misc]


def test_booking_exposes_request_data():
    request = BookingRequest("1.03", date(2021, 6, 1), date(2021, 6, 4), 2)
    booking = Booking(booking_id="abc", request=request)

    assert booking.room_id == "1.03"
    assert booking.nights == 3


def test_booking_requires_identifier():
    request = BookingRequest("1.03", date(2021, 6, 1), date(2021, 6, 4), 2)
    with pytest.raises(ValueError):
        Booking(booking_id="", request=request)


def test_exception_hierarchy():
    for exc_type in (ValidationException, BusinessException, NotFoundException):
        assert issubclass(exc_type, DomainException)

    error = NotFoundException("missing-id")
    assert error.booking_id == "missing-id"
    assert "missing-id" in str(error)
