import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from todolists import create_app
from todolists.domains.lists.session import TodoSession


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no app or request context)")
    config.addinivalue_line("markers", "integration: Integration tests (app, routes, session store)")


@pytest.fixture()
def app():
    """Per-test app; the in-memory session store starts empty every time."""
    app = create_app("testing")
    yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def todo_session():
    """A TodoSession over a plain dict, for service-level tests."""
    return TodoSession({})


@pytest.fixture()
def session_lists(client):
    """Callable returning the raw list payloads stored for the client's session."""

    def _read():
        with client.session_transaction() as sess:
            return sess.get("lists", [])

    return _read
