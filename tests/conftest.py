from datetime import date

import pytest

from todocal.models.item import Item
from todocal.service import TodoService
from todocal.storage import JSONItemStore, MemoryItemStore


@pytest.fixture
def sample_items():
    """A mix of single-day, ranged, inverted and undated items."""
    return [
        Item(id="a", text="Dentist", start_date=date(2024, 3, 1)),
        Item(
            id="b",
            text="Conference",
            start_date=date(2024, 3, 1),
            end_date=date(2024, 3, 3),
        ),
        Item(id="c", text="Call mom", start_date=date(2024, 3, 2), start_time="18:00"),
        Item(id="d", text="Read a book"),
        Item(
            id="e",
            text="Inverted",
            start_date=date(2024, 3, 5),
            end_date=date(2024, 3, 4),
        ),
    ]


@pytest.fixture
def memory_store():
    return MemoryItemStore()


@pytest.fixture
def json_store(tmp_path):
    return JSONItemStore(tmp_path / "data" / "calendar-todos.json")


@pytest.fixture
def service(memory_store):
    return TodoService(memory_store)


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Point the CLI at a throwaway data and log directory."""
    monkeypatch.setenv("TODOCAL_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("TODOCAL_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("TODOCAL_STORAGE_BACKEND", "json")
    monkeypatch.delenv("TODOCAL_WEEK_STARTS_ON", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
