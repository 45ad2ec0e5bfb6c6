"""Tests for the todo service."""

from datetime import date

import pytest

from todocal.exceptions import ItemNotFoundError, ValidationError
from todocal.grid import build_month_grid
from todocal.models.item import Category


def test_add_trims_text(service):
    item = service.add("  Buy milk  ", start_date=date(2024, 3, 1))
    assert item.text == "Buy milk"
    assert item.id
    assert service.all() == [item]


@pytest.mark.parametrize("text", ["", "   "])
def test_add_blank_text_rejected(service, text):
    with pytest.raises(ValidationError):
        service.add(text)
    assert service.all() == []


def test_add_invalid_time_rejected(service):
    with pytest.raises(ValidationError):
        service.add("Meeting", start_time="99:99")


def test_add_full_item(service):
    item = service.add(
        "Workshop",
        start_date=date(2024, 3, 1),
        end_date=date(2024, 3, 3),
        start_time="0900",
        end_time="17:00",
        category="study",
        owner="Jisoo",
    )
    assert item.start_time == "09:00"
    assert item.category == Category.STUDY
    assert item.owner == "Jisoo"
    assert item.is_ranged


def test_toggle(service):
    item = service.add("Laundry")
    assert service.toggle(item.id).done is True
    assert service.toggle(item.id).done is False


def test_toggle_unknown(service):
    with pytest.raises(ItemNotFoundError):
        service.toggle("nope")


def test_update_and_clear(service):
    item = service.add("Trip", start_date=date(2024, 3, 1), start_time="08:00")
    updated = service.update(item.id, end_date=date(2024, 3, 4), start_time=None)
    assert updated.end_date == date(2024, 3, 4)
    assert updated.start_time is None
    assert service.get(item.id) == updated


def test_update_blank_text_rejected(service):
    item = service.add("Trip")
    with pytest.raises(ValidationError):
        service.update(item.id, text="  ")
    with pytest.raises(ValidationError):
        service.update(item.id, text=None)
    assert service.get(item.id).text == "Trip"


def test_delete(service):
    item = service.add("Trip")
    service.delete(item.id)
    with pytest.raises(ItemNotFoundError):
        service.get(item.id)
    with pytest.raises(ItemNotFoundError):
        service.delete(item.id)


def test_day_and_undated_views(service):
    """Day views include ranged items; undated items stay separate."""
    single = service.add("Dentist", start_date=date(2024, 3, 2))
    ranged = service.add("Conference", start_date=date(2024, 3, 1), end_date=date(2024, 3, 3))
    floating = service.add("Read a book")

    assert service.items_for_day(date(2024, 3, 2)) == [single, ranged]
    assert service.items_for_day(date(2024, 3, 3)) == [ranged]
    assert service.items_for_day(date(2024, 3, 4)) == []
    assert service.undated() == [floating]


def test_month_items(service):
    ranged = service.add("Conference", start_date=date(2024, 2, 28), end_date=date(2024, 3, 1))
    grid = build_month_grid(date(2024, 3, 1))
    by_day = service.month_items(grid)
    assert by_day[date(2024, 2, 28)] == [ranged]
    assert by_day[date(2024, 3, 1)] == [ranged]
    assert by_day[date(2024, 3, 2)] == []


def test_service_with_json_store(json_store):
    """Changes survive a fresh service on the same file."""
    from todocal.service import TodoService

    first = TodoService(json_store)
    item = first.add("Persisted", start_date=date(2024, 3, 1))
    first.toggle(item.id)

    second = TodoService(type(json_store)(json_store.path))
    assert second.items_for_day(date(2024, 3, 1))[0].done is True
