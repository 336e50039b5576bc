from prometheus_client import CollectorRegistry, Gauge, Histogram

REGULAR_WORK = "regularWork"
SLOW_WORK = "slowWork"
HANDLERS = (REGULAR_WORK, SLOW_WORK)
CODES = ("200", "500")

# Chosen because the simulated range is 0-300 ms
BUCKETS = (.025, .05, .075, .1, .125, .15, .175, .2, .225, .25, .275, .3)


def build_metrics(registry: CollectorRegistry, port: int):
    """Register program_info and the duration histogram on `registry`."""
    info = Gauge("program_info", "Info about the program.", ["port"], registry=registry)
    info.labels(str(port)).set(1)
    durs = Histogram(
        "http_request_duration_seconds",
        "HTTP request duration.",
        ["handler", "code"],
        buckets=BUCKETS,
        registry=registry,
    )
    return info, durs
