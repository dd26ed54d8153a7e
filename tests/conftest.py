import os
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Point the app at a throwaway storage file before importing the Flask app.
TEST_STORAGE_PATH = Path(__file__).resolve().parent / "pytest_storage.json"
os.environ["FLASK_ENV"] = "testing"
os.environ["SECRET_KEY"] = "test_secret_key"
os.environ["NOTICE_STORAGE_PATH"] = TEST_STORAGE_PATH.as_posix()

from app import app as _flask_app
from routes.notice import init_notice_board
from services.announcement_store import AnnouncementRepository, AnnouncementStore
from services.edit_session import EditSession
from services.storage import LocalStorage, MemoryStorage


class FixedClock:
    """Deterministic clock: every call advances one second."""

    def __init__(self, start):
        self.current = start

    def __call__(self):
        value = self.current
        self.current = value + timedelta(seconds=1)
        return value


@pytest.fixture
def storage_path(tmp_path):
    return tmp_path / "local_storage.json"


@pytest.fixture
def flask_app(storage_path):
    _flask_app.config["TESTING"] = True
    _flask_app.config["WTF_CSRF_ENABLED"] = False

    with _flask_app.app_context():
        init_notice_board(_flask_app, storage=LocalStorage(storage_path))
        yield _flask_app


@pytest.fixture
def client(flask_app):
    with flask_app.test_client() as client:
        yield client


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def store(memory_storage):
    return AnnouncementStore(AnnouncementRepository(memory_storage))


@pytest.fixture
def clock():
    return FixedClock(datetime(2026, 3, 1, 6, 0, 0))


@pytest.fixture
def session(store, clock):
    answers = []

    def confirm(message):
        return answers.pop(0) if answers else False

    s = EditSession(store, confirm=confirm, clock=clock)
    s.confirm_answers = answers
    s.start()
    return s
