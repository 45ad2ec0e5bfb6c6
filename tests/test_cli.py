"""Tests for the command-line interface."""

import json
from datetime import date

from typer.testing import CliRunner

from todocal_cli.parser import app

runner = CliRunner()


def _stored_items(cli_env):
    path = cli_env / "data" / "calendar-todos.json"
    return json.loads(path.read_text(encoding="utf-8"))["items"]


def test_add_and_show_day(cli_env):
    result = runner.invoke(app, ["add", "Buy milk", "--date", "2024-03-01", "--from", "0930"])
    assert result.exit_code == 0, result.output
    assert "Added" in result.output

    items = _stored_items(cli_env)
    assert items[0]["text"] == "Buy milk"
    assert items[0]["start_time"] == "09:30"

    result = runner.invoke(app, ["day", "2024-03-01"])
    assert result.exit_code == 0
    assert "Buy milk" in result.output
    assert "1 item" in result.output


def test_ranged_item_shows_on_every_day(cli_env):
    runner.invoke(app, ["add", "Conference", "-d", "2024-03-01", "-e", "2024-03-03"])

    for day in ("2024-03-01", "2024-03-02", "2024-03-03"):
        result = runner.invoke(app, ["day", day])
        assert "Conference" in result.output
    result = runner.invoke(app, ["day", "2024-03-04"])
    assert "Conference" not in result.output
    assert "No items on this day" in result.output


def test_undated(cli_env):
    runner.invoke(app, ["add", "Someday", "--category", "Personal"])
    result = runner.invoke(app, ["undated"])
    assert result.exit_code == 0
    assert "Someday" in result.output
    assert _stored_items(cli_env)[0]["category"] == "personal"


def test_add_blank_text_fails(cli_env):
    result = runner.invoke(app, ["add", "   "])
    assert result.exit_code == 1


def test_add_end_without_start_fails(cli_env):
    result = runner.invoke(app, ["add", "Trip", "--end", "2024-03-03"])
    assert result.exit_code != 0


def test_bad_date(cli_env):
    result = runner.invoke(app, ["day", "03/01/2024"])
    assert result.exit_code != 0


def test_done_edit_rm(cli_env):
    runner.invoke(app, ["add", "Laundry", "-d", "2024-03-01"])
    item_id = _stored_items(cli_env)[0]["id"]

    result = runner.invoke(app, ["done", item_id[:8]])
    assert result.exit_code == 0, result.output
    assert _stored_items(cli_env)[0]["done"] is True

    result = runner.invoke(app, ["edit", item_id, "--text", "Fold laundry", "--undate"])
    assert result.exit_code == 0, result.output
    stored = _stored_items(cli_env)[0]
    assert stored["text"] == "Fold laundry"
    assert "start_date" not in stored

    result = runner.invoke(app, ["rm", item_id[:8]])
    assert result.exit_code == 0, result.output
    assert f"Deleted {item_id[:8]} Fold laundry" in result.output
    assert _stored_items(cli_env) == []


def test_unknown_item_id(cli_env):
    result = runner.invoke(app, ["rm", "doesnotexist"])
    assert result.exit_code == 1
    result = runner.invoke(app, ["done", "doesnotexist"])
    assert result.exit_code == 1


def test_edit_without_changes_fails(cli_env):
    runner.invoke(app, ["add", "Laundry"])
    item_id = _stored_items(cli_env)[0]["id"]
    result = runner.invoke(app, ["edit", item_id])
    assert result.exit_code != 0


def test_month(cli_env):
    runner.invoke(app, ["add", "Dentist", "-d", "2024-03-14"])
    result = runner.invoke(app, ["month", "--month", "2024-03"])
    assert result.exit_code == 0, result.output
    assert "March 2024" in result.output
    assert "•1" in result.output


def test_month_offset_and_week_start(cli_env):
    result = runner.invoke(
        app, ["month", "--select", "2024-01-31", "--offset", "1", "--week-start", "1"]
    )
    assert result.exit_code == 0, result.output
    assert "February 2024" in result.output


def test_month_default_is_current(cli_env):
    result = runner.invoke(app, ["month"])
    assert result.exit_code == 0, result.output
    assert date.today().strftime("%B %Y") in result.output


def test_writes_log_file(cli_env):
    runner.invoke(app, ["--verbose", "add", "Logged"])
    log_file = cli_env / "logs" / "todocal.log"
    assert log_file.exists()
    assert "Added item" in log_file.read_text()


def test_month_at_calendar_edges(cli_env):
    """The first and last representable months render."""
    result = runner.invoke(app, ["month", "--month", "0001-01"])
    assert result.exit_code == 0, result.output
    result = runner.invoke(app, ["month", "--month", "9999-12"])
    assert result.exit_code == 0, result.output
    assert "December 9999" in result.output


def test_malformed_store_exits_cleanly(cli_env):
    """A store file with the wrong structure is reported, not a traceback."""
    store_path = cli_env / "data" / "calendar-todos.json"
    store_path.parent.mkdir(parents=True)
    store_path.write_text(json.dumps({"items": None}))

    result = runner.invoke(app, ["day", "2024-03-01"])
    assert result.exit_code == 1
    assert not isinstance(result.exception, TypeError)


def test_edit_warns_on_inverted_range(cli_env):
    """Editing an item so its end precedes its start logs the same warning as add."""
    log_file = cli_env / "logs" / "todocal.log"
    runner.invoke(app, ["add", "Trip", "-d", "2024-03-05"])
    item_id = _stored_items(cli_env)[0]["id"]
    assert "is before start date" not in log_file.read_text()

    result = runner.invoke(app, ["edit", item_id, "--end", "2024-03-04"])
    assert result.exit_code == 0, result.output
    assert "End date 2024-03-04 is before start date 2024-03-05" in log_file.read_text()
    assert _stored_items(cli_env)[0]["end_date"] == "2024-03-04"


def test_add_warns_on_inverted_range(cli_env):
    runner.invoke(app, ["add", "Trip", "-d", "2024-03-05", "-e", "2024-03-01"])
    log_file = cli_env / "logs" / "todocal.log"
    assert "is before start date" in log_file.read_text()
