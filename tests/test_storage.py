"""Unit tests for input snapshot persistence."""

import json

import pytest

from bunkapp.exceptions import StorageError
from bunkapp.models import StoredInputs
from bunkapp.storage import INPUTS_KEY, InputStore, parse_count, to_attendance_input


def test_parse_count():
    """Counts are parsed like the input form parses them."""
    assert parse_count("42") == 42
    assert parse_count(" 7") == 7
    assert parse_count("12abc") == 12
    assert parse_count("") == 0
    assert parse_count("abc") == 0
    assert parse_count(None) == 0

    # Only ASCII digits count, as in the browser form
    assert parse_count("٣") == 0
    assert parse_count("４2") == 0
    assert parse_count("7٣") == 7


def test_to_attendance_input():
    """Snapshots convert to evaluator input with defaults for blanks."""
    data = to_attendance_input(StoredInputs(
        total_lectures="40",
        attended_lectures="31",
        attendance_criteria=[80]
    ))
    assert data.total_lectures == 40
    assert data.attended_lectures == 31
    assert data.attendance_criteria == 80

    blank = to_attendance_input(StoredInputs(attendance_criteria=[]))
    assert blank.total_lectures == 0
    assert blank.attended_lectures == 0
    assert blank.attendance_criteria == 75

    zero = to_attendance_input(StoredInputs(attendance_criteria=[0]), default_criteria=60)
    assert zero.attendance_criteria == 60


def test_load_missing_file_returns_default(tmp_path):
    """No file yet means the default snapshot."""
    store = InputStore(str(tmp_path / "storage.json"))
    snapshot = store.load()
    assert snapshot.total_lectures == ""
    assert snapshot.attended_lectures == ""
    assert snapshot.attendance_criteria == [75]


def test_save_then_load(tmp_path):
    """The last saved snapshot is returned, under the fixed key."""
    path = tmp_path / "nested" / "storage.json"
    store = InputStore(str(path))

    store.save(StoredInputs(total_lectures="10", attended_lectures="8", attendance_criteria=[75]))
    store.save(StoredInputs(total_lectures="12", attended_lectures="9", attendance_criteria=[70]))

    snapshot = store.load()
    assert snapshot.total_lectures == "12"
    assert snapshot.attended_lectures == "9"
    assert snapshot.attendance_criteria == [70]

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert list(raw) == [INPUTS_KEY]


def test_save_keeps_other_keys(tmp_path):
    """Other keys in the store file are left alone."""
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")

    InputStore(str(path)).save(StoredInputs(total_lectures="5"))

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["theme"] == "dark"
    assert raw[INPUTS_KEY]["total_lectures"] == "5"


@pytest.mark.parametrize("content", [
    "not json",
    json.dumps([1, 2, 3]),
    json.dumps({INPUTS_KEY: {"attendance_criteria": "lots"}}),
])
def test_load_unreadable_returns_default(tmp_path, content):
    """Corrupt or malformed storage falls back to the default."""
    path = tmp_path / "storage.json"
    path.write_text(content, encoding="utf-8")

    snapshot = InputStore(str(path), default_criteria=80).load()
    assert snapshot == StoredInputs(attendance_criteria=[80])


def test_save_failure_raises_storage_error(tmp_path):
    """Write failures surface as StorageError."""
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = InputStore(str(blocker / "storage.json"))

    with pytest.raises(StorageError) as exc_info:
        store.save(StoredInputs())
    assert exc_info.value.path == str(blocker / "storage.json")


def test_load_input(tmp_path):
    """The stored snapshot is converted for the evaluator."""
    store = InputStore(str(tmp_path / "storage.json"))
    store.save(StoredInputs(total_lectures="100", attended_lectures="80", attendance_criteria=[75]))

    data = store.load_input()
    assert (data.total_lectures, data.attended_lectures, data.attendance_criteria) == (100, 80, 75)
