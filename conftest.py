import json

import pytest
from fastapi.testclient import TestClient

from app.config import get_settings
from app.main import app

CARRIERS = [
    {
        "mc_number": "111",
        "dot_number": "999",
        "carrier_name": "Acme",
        "status": "Active",
        "city": "Chicago",
        "zip": "60601",
    },
    {
        "mc_number": "444",
        "dot_number": "888",
        "carrier_name": "Blue Line Freight",
        "status": "inactive",
        "city": "Dallas",
        "zip": "75201",
    },
    {
        "mc_number": "555",
        "dot_number": "777",
        "carrier_name": "Acme West",
        "status": "ACTIVE",
        "city": "Denver",
        "zip": "80202",
    },
    {
        "mc_number": "555",
        "dot_number": "666",
        "carrier_name": "Acme West II",
        "status": "Suspended",
        "city": "Denver",
        "zip": "80203",
    },
]


@pytest.fixture
def carriers_file(tmp_path):
    path = tmp_path / "carriers.json"
    path.write_text(json.dumps(CARRIERS), encoding="utf-8")
    return path


@pytest.fixture
def responses_file(tmp_path):
    return tmp_path / "responses.json"


@pytest.fixture
def configure(monkeypatch, carriers_file, responses_file):
    """Point settings at temp files; returns a setter for overrides."""

    def _set(**env):
        values = {
            "CARRIERS_PATH": str(carriers_file),
            "RESPONSES_PATH": str(responses_file),
            **env,
        }
        for key, value in values.items():
            monkeypatch.setenv(key, value)
        get_settings.cache_clear()

    _set()
    yield _set
    get_settings.cache_clear()


@pytest.fixture
def client(configure):
    with TestClient(app) as c:
        yield c
