import json
from threading import Thread

import pytest

from managers.contact_manager import ContactManager, utc_timestamp
from utils.errors import ContactValidationError

VALID = {"name": "Ada", "email": "a@x.com", "message": "hi"}


@pytest.fixture
def manager(tmp_path):
    return ContactManager(tmp_path / "nested" / "messages.json")


def test_append_creates_file_and_parents(manager):
    assert not manager.log_file.exists()
    entry = manager.append(VALID)
    assert manager.log_file.exists()
    assert json.loads(manager.log_file.read_text()) == [entry]


def test_extra_fields_are_not_stored(manager):
    entry = manager.append({**VALID, "admin": True})
    assert set(entry) == {"name", "email", "message", "ts"}


def test_validate_reports_missing_fields():
    with pytest.raises(ContactValidationError) as exc:
        ContactManager.validate({"name": "Ada", "email": ""})
    assert exc.value.missing == ["email", "message"]
    assert str(exc.value) == "Missing fields"


@pytest.mark.parametrize("data", [None, [], "text", {"name": 1, "email": "a@x.com", "message": "hi"}])
def test_validate_rejects_non_string_payloads(data):
    with pytest.raises(ContactValidationError):
        ContactManager.validate(data)


def test_non_array_log_treated_as_empty(manager):
    manager.log_file.parent.mkdir(parents=True)
    manager.log_file.write_text('{"not": "a list"}')
    manager.append(VALID)
    assert len(json.loads(manager.log_file.read_text())) == 1


def test_existing_entries_are_kept(manager):
    manager.log_file.parent.mkdir(parents=True)
    manager.log_file.write_text(json.dumps([{"name": "Old", "email": "o@x.com", "message": "m", "ts": "t"}]))
    manager.append(VALID)
    names = [e["name"] for e in json.loads(manager.log_file.read_text())]
    assert names == ["Old", "Ada"]


def test_concurrent_appends_are_not_lost(manager):
    threads = [
        Thread(target=manager.append, args=({**VALID, "message": f"m{i}"},))
        for i in range(20)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    messages = {e["message"] for e in json.loads(manager.log_file.read_text())}
    assert messages == {f"m{i}" for i in range(20)}


def test_utc_timestamp_format():
    ts = utc_timestamp()
    # 2024-01-02T03:04:05.678Z
    assert len(ts) == 24
    assert ts[10] == "T" and ts.endswith("Z")
