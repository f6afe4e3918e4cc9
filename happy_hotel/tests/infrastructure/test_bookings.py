import json
from datetime import date

import pytest

from happy_hotel.domain.exceptions import NotFoundException
from happy_hotel.domain.value_objects import BookingRequest
from happy_hotel.infrastructure.bookings import (
    InMemoryBookingStore,
    JsonFileBookingStore,
)


@pytest.fixture
def booking_request() -> BookingRequest:
    return BookingRequest("1.03", date(2022, 3, 1), date(2022, 3, 4), 3, prepaid=True)


@pytest.fixture(params=["memory", "json"])
def store(request, tmp_path):
    """Фикстура: оба хранилища должны вести себя одинаково."""
    if request.param == "memory":
        return InMemoryBookingStore()
    return JsonFileBookingStore(tmp_path / "bookings.json")


def test_saved_booking_can_be_read(store, booking_request: BookingRequest):
    booking_id = store.save(booking_request)

    booking = store.get(booking_id)

    assert booking_id
    assert booking.booking_id == booking_id
    assert booking.request == booking_request


def test_each_save_creates_new_booking(store, booking_request: BookingRequest):
    first = store.save(booking_request)
    second = store.save(booking_request)

    assert first != second
    assert len(store) == 2


def test_removed_booking_is_gone(store, booking_request: BookingRequest):
    booking_id = store.save(booking_request)

    store.remove(booking_id)

    with pytest.raises(NotFoundException):
        store.get(booking_id)


def test_unknown_booking_is_not_found(store):
    with pytest.raises(NotFoundException):
        store.get("missing")
    with pytest.raises(NotFoundException):
        store.remove("missing")


def test_later_changes_to_request_are_not_stored(store, booking_request: BookingRequest):
    booking_id = store.save(booking_request)

    booking_request.room_id = "9.99"

    assert store.get(booking_id).room_id == "1.03"


def test_json_store_survives_reload(tmp_path, booking_request: BookingRequest):
    file_path = tmp_path / "data" / "bookings.json"
    booking_id = JsonFileBookingStore(file_path).save(booking_request)

    reloaded = JsonFileBookingStore(file_path)

    assert reloaded.get(booking_id).request == booking_request
    saved = json.loads(file_path.read_text(encoding="utf-8"))
    assert saved[0]["id"] == booking_id
    assert saved[0]["check_in"] == "2022-03-01"


def test_json_store_accepts_empty_file(tmp_path):
    file_path = tmp_path / "bookings.json"
    file_path.write_text("", encoding="utf-8")

    assert len(JsonFileBookingStore(file_path)) == 0
