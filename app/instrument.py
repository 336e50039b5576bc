import functools
import time
from typing import Iterable

from prometheus_client import Histogram


class InstrumentedHandler:
    """Times an async endpoint into `histogram{handler=<label>, code=<status>}`.

    The handler label is fixed here, so only the status code varies per request.
    Nothing is observed when the wrapped endpoint raises.
    """

    def __init__(self, histogram: Histogram, handler_label: str):
        self.histogram = histogram
        self.handler_label = handler_label

    def touch(self, codes: Iterable[str]) -> None:
        # creates the child series with a zero count
        for code in codes:
            self.histogram.labels(handler=self.handler_label, code=code)

    def observe(self, code, seconds: float) -> None:
        self.histogram.labels(handler=self.handler_label, code=str(code)).observe(seconds)

    def __call__(self, endpoint):
        @functools.wraps(endpoint)
        async def wrapper(*args, **kwargs):
            t0 = time.perf_counter()
            response = await endpoint(*args, **kwargs)
            self.observe(getattr(response, "status_code", 200), time.perf_counter() - t0)
            return response

        return wrapper
