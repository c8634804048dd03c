import json

import pytest

from app import create_app
from config import TestingConfig

PROJECTS = [
    {"title": "Zeta", "summary": "Last letter first"},
    {"title": "Alpha", "summary": "<b>bold</b> claims"},
]

SERVICES = {"list": [{"title": "Audit", "text": "Code review"}], "intro": "What we do"}

ABOUT = {"summary": "We build websites.", "full": "Since 2019."}

SOFTWARE = {"tools": [{"name": "Flask", "desc": "Web services"}]}

TEAM = [{"name": "Ada", "role": "Engineer", "bio": "Writes code", "photo": "ada.jpg"}]


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def content_dir(tmp_path):
    d = tmp_path / "data"
    d.mkdir()
    write_json(d / "projects.json", PROJECTS)
    write_json(d / "services.json", SERVICES)
    write_json(d / "about.json", ABOUT)
    write_json(d / "software.json", SOFTWARE)
    write_json(d / "team.json", TEAM)
    return d


@pytest.fixture
def log_file(tmp_path):
    return tmp_path / "uploads" / "messages.json"


@pytest.fixture
def app(content_dir, log_file, tmp_path):
    assets = tmp_path / "assets"
    assets.mkdir()
    return create_app(TestingConfig, {
        "CONTENT_DIR": content_dir,
        "CONTACT_LOG_FILE": log_file,
        "ASSETS_DIR": assets,
    })


@pytest.fixture
def client(app):
    return app.test_client()


def read_log(path):
    return json.loads(path.read_text(encoding="utf-8"))
