import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_settings
from app.core.config import Settings
from app.main import app
from app.services.ledger_service import MessageLedger
from tests.helpers import make_settings


@pytest.fixture
def demo_settings() -> Settings:
    return make_settings()


@pytest.fixture
def ledger() -> MessageLedger:
    return MessageLedger()


@pytest.fixture
def client(demo_settings, ledger):
    """Client against the app in template + demo mode with an empty ledger."""
    previous_ledger = app.state.ledger
    app.state.ledger = ledger
    app.dependency_overrides[get_settings] = lambda: demo_settings

    yield TestClient(app, raise_server_exceptions=False)

    app.dependency_overrides.clear()
    app.state.ledger = previous_ledger
