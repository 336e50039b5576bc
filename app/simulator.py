# Synthetic latency/outcome policies for the two work endpoints
from dataclasses import dataclass

import numpy as np

SUCCESS_BODY = b"b = :-) "
SLOW_BODY = "b = 🐢 ".encode("utf-8")
ERROR_BODY = b"OMG Error!"

FAILURE_CUTOFF = 25  # draws 1..25 fail -> 25%


@dataclass(frozen=True)
class SimulationOutcome:
    delay_ms: int
    status_code: int
    payload: bytes

    @property
    def delay(self) -> float:
        return self.delay_ms / 1000.0

    @property
    def failed(self) -> bool:
        return self.status_code >= 500


def default_rng(seed=None):
    return np.random.default_rng(seed)


def regular_work(rng) -> SimulationOutcome:
    """Draw 1..100 ms; the same draw decides the outcome, low draws fail."""
    s = int(rng.integers(1, 101))
    if s <= FAILURE_CUTOFF:
        return SimulationOutcome(s, 500, ERROR_BODY)
    return SimulationOutcome(s, 200, SUCCESS_BODY)


def slow_work(rng) -> SimulationOutcome:
    """100..299 ms, never fails."""
    s = 100 + int(rng.integers(0, 200))
    return SimulationOutcome(s, 200, SLOW_BODY)
