import pytest
import structlog
from fastapi.testclient import TestClient
from prometheus_client import CollectorRegistry

from app.config import Config
from app.main import create_app


class FixedDraws:
    """Random source that hands out preset values from integers()."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def integers(self, low, high):
        self.calls.append((low, high))
        return self.values.pop(0)


@pytest.fixture
def registry():
    return CollectorRegistry()


@pytest.fixture
def make_client(registry):
    def _make(*draws, config=None):
        app = create_app(config or Config(), registry=registry, rng=FixedDraws(*draws))
        return TestClient(app)
    return _make


def series_count(registry, handler, code):
    return registry.get_sample_value(
        "http_request_duration_seconds_count", {"handler": handler, "code": code}
    )


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def bucket(registry, handler, le, code="200"):
    return registry.get_sample_value(
        "http_request_duration_seconds_bucket", {"handler": handler, "code": code, "le": le}
    )
