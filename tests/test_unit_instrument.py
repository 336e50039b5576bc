import asyncio

import pytest
from prometheus_client import CollectorRegistry

from app.instrument import InstrumentedHandler
from app.metrics import CODES, build_metrics


class FakeResponse:
    def __init__(self, status_code):
        self.status_code = status_code


def _durs():
    registry = CollectorRegistry()
    _, durs = build_metrics(registry, 8081)
    return registry, durs


def _count(registry, code, handler="regularWork"):
    return registry.get_sample_value(
        "http_request_duration_seconds_count", {"handler": handler, "code": code}
    )


def test_touch_creates_zero_series():
    registry, durs = _durs()
    InstrumentedHandler(durs, "regularWork").touch(CODES)
    assert _count(registry, "200") == 0.0
    assert _count(registry, "500") == 0.0
    assert _count(registry, "200", handler="slowWork") is None


def test_observes_response_status():
    registry, durs = _durs()

    async def endpoint():
        return FakeResponse(500)

    resp = asyncio.run(InstrumentedHandler(durs, "regularWork")(endpoint)())
    assert resp.status_code == 500
    assert _count(registry, "500") == 1.0
    assert _count(registry, "200") is None


def test_defaults_to_200():
    registry, durs = _durs()

    async def endpoint():
        return {"ok": True}

    asyncio.run(InstrumentedHandler(durs, "slowWork")(endpoint)())
    assert _count(registry, "200", handler="slowWork") == 1.0


def test_no_observation_when_endpoint_raises():
    registry, durs = _durs()

    async def endpoint():
        raise RuntimeError("boom")

    wrapped = InstrumentedHandler(durs, "regularWork")(endpoint)
    with pytest.raises(RuntimeError):
        asyncio.run(wrapped())
    assert _count(registry, "200") is None
    assert _count(registry, "500") is None


def test_wrapper_keeps_endpoint_name():
    _, durs = _durs()

    async def regular_work(request):
        return FakeResponse(200)

    wrapped = InstrumentedHandler(durs, "regularWork")(regular_work)
    assert wrapped.__name__ == "regular_work"
    assert wrapped.__wrapped__ is regular_work
