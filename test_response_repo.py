import json
import threading

from app.db.repositories.response_repo import ResponseLog
from app.db.schema import init_response_log


def _fields(**kw):
    base = {
        "carrier_mc": None,
        "carrier_name": None,
        "phone_number": None,
        "dispatcher_name": None,
    }
    base.update(kw)
    return base


def test_init_creates_empty_log(tmp_path):
    path = tmp_path / "nested" / "responses.json"
    init_response_log(path)
    assert json.loads(path.read_text()) == []


def test_init_failure_is_not_fatal(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    init_response_log(blocker / "responses.json")
    assert "Could not initialize response log" in caplog.text


def test_append_without_file_starts_fresh(tmp_path):
    log = ResponseLog(tmp_path / "responses.json")
    entry = log.append(_fields(carrier_mc="111"))
    assert log.read_all() == [entry]


def test_append_omits_enrichment_when_not_given(tmp_path):
    log = ResponseLog(tmp_path / "responses.json")
    entry = log.append(_fields())
    assert set(entry) == {
        "carrier_mc",
        "carrier_name",
        "phone_number",
        "dispatcher_name",
        "timestamp",
    }


def test_concurrent_appends_are_not_lost(tmp_path):
    log = ResponseLog(tmp_path / "responses.json")

    def worker(n):
        for i in range(5):
            log.append(_fields(dispatcher_name=f"{n}-{i}"))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    entries = log.read_all()
    assert len(entries) == 40
    assert len({e["dispatcher_name"] for e in entries}) == 40


def test_no_temp_files_left_behind(tmp_path):
    log = ResponseLog(tmp_path / "responses.json")
    log.append(_fields())
    log.append(_fields())
    assert [p.name for p in tmp_path.iterdir()] == ["responses.json"]
