import asyncio
import time

from fastapi import Request
from fastapi.responses import Response

from app import simulator

MEDIA_TYPE = "text/plain; charset=utf-8"
REQUEST_ID_HEADER = "X-Request-ID"


def _request_log(log, request: Request):
    path = request.url.path
    if request.url.query:
        path += "?" + request.url.query
    return log.bind(
        method=request.method,
        path=path,
        request_id=request.headers.get(REQUEST_ID_HEADER, ""),
    )


def regular_work_handler(log, rng):
    """Pretend work: 1..100 ms, roughly a quarter of calls fail with a 500."""

    async def regular_work(request: Request) -> Response:
        rlog = _request_log(log, request)
        t0 = time.perf_counter()
        status = 200
        try:
            outcome = simulator.regular_work(rng)
            rlog = rlog.bind(s=outcome.delay_ms)
            await asyncio.sleep(outcome.delay)
            if outcome.failed:
                status = outcome.status_code
                rlog.error(outcome.payload.decode())
            return Response(outcome.payload, status_code=status, media_type=MEDIA_TYPE)
        finally:
            rlog.info("request completed", status=status, duration=time.perf_counter() - t0)

    return regular_work


def slow_work_handler(log, rng):
    """Slow pretend work: 100..299 ms, always succeeds."""

    async def slow_work(request: Request) -> Response:
        rlog = _request_log(log, request)
        t0 = time.perf_counter()
        try:
            outcome = simulator.slow_work(rng)
            await asyncio.sleep(outcome.delay)
            return Response(outcome.payload, media_type=MEDIA_TYPE)
        finally:
            rlog.info("request completed", status=200, duration=time.perf_counter() - t0)

    return slow_work
