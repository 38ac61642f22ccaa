import pytest
from starlette.testclient import TestClient

from agencytrack.config.config_manager import ConfigManager
from agencytrack.core.store import AgencyState
from agencytrack.main import create_app


@pytest.fixture
def state():
    return AgencyState.from_sample()


@pytest.fixture
def config(monkeypatch):
    for name in ("AGENCYTRACK_CONFIG", "LOG_LEVEL", "LOG_FILE", "REPORT_DELAY_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    cfg = ConfigManager(use_env=False)
    cfg.set("reports", "generation_delay_seconds", 0.0)
    return cfg


@pytest.fixture
def client(config, state):
    app = create_app(config=config, state=state)
    with TestClient(app) as c:
        yield c
