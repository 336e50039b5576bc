import socket
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import CollectorRegistry, generate_latest, CONTENT_TYPE_LATEST

from app import simulator
from app.config import Config
from app.errors import ServiceError, StartupError
from app.handlers import regular_work_handler, slow_work_handler
from app.instrument import InstrumentedHandler
from app.logs import configure_logging, get_logger
from app.metrics import CODES, REGULAR_WORK, SLOW_WORK, build_metrics

ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


def create_app(config: Config = None, registry: CollectorRegistry = None, rng=None, log=None) -> FastAPI:
    config = config or Config()
    registry = registry if registry is not None else CollectorRegistry()
    rng = rng if rng is not None else simulator.default_rng()
    log = log or get_logger()

    _, durs = build_metrics(registry, config.port)
    regular = InstrumentedHandler(durs, REGULAR_WORK)
    slow = InstrumentedHandler(durs, SLOW_WORK)
    # series exist with a zero count before any traffic
    regular.touch(CODES)
    slow.touch(CODES)

    app = FastAPI(title="serviceb")

    @app.get("/metrics")
    def metrics():
        return Response(generate_latest(registry), media_type=CONTENT_TYPE_LATEST)

    app.add_api_route("/slow", slow(slow_work_handler(log, rng)), methods=ANY_METHOD)
    app.add_api_route("/", regular(regular_work_handler(log, rng)), methods=ANY_METHOD)
    return app


def bind_socket(host: str, port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as exc:
        sock.close()
        raise StartupError(str(exc)) from exc
    return sock


def main():
    configure_logging()
    log = get_logger()
    try:
        config = Config.from_env()
        configure_logging(config.log_level)
        app = create_app(config, log=log)
        sock = bind_socket(config.host, config.port)
    except ServiceError as exc:
        log.critical("Errored with: " + str(exc))
        sys.exit(1)

    log.info(f"Listening at: http://localhost:{config.port}")
    server = uvicorn.Server(uvicorn.Config(app, log_level=config.log_level, access_log=False))
    server.run(sockets=[sock])


if __name__ == "__main__":
    main()
