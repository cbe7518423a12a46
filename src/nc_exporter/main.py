#!/usr/bin/env python3
"""
main.py
- HTTP entrypoint of the Nextcloud Prometheus exporter.
- Loads the Nextcloud status page on every scrape, converts it into metrics and
  serves them in the Prometheus text format:
    - GET /metrics (and GET /): one scrape per request
    - GET /healthz: liveness probe
"""

import sys

import sentry_sdk
import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from loguru import logger

from nc_exporter.core.config import CONFIG_PATH, EXPORTER_HOST, EXPORTER_PORT, LOG_LEVEL, SENTRY_DSN
from nc_exporter.core.config_loader import load_exporter_config, load_replacement_table, resolve_replacement_path
from nc_exporter.core.errors import ConfigError, FetchError, ParseError
from nc_exporter.core.state import RequestCounter
from nc_exporter.lib.exposition import CONTENT_TYPE, render_exposition
from nc_exporter.lib.status_page import load_status_page
from nc_exporter.runner.scrape import ScrapePipeline

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


# --- Logging Setup ---
def configure_logging(level=LOG_LEVEL):
    logger.remove()
    logger.add(sys.stderr, level=level, colorize=True, format=LOG_FORMAT)


# --- Error Reporting ---
def configure_sentry(dsn=SENTRY_DSN):
    if dsn:
        sentry_sdk.init(dsn=dsn, traces_sample_rate=1.0)
        logger.info("[main] Sentry error reporting enabled")


def load_runtime(config_path=CONFIG_PATH):
    """Load the exporter config and its replacement table. Raises ConfigError."""
    config = load_exporter_config(config_path)
    replacements = load_replacement_table(resolve_replacement_path(config, config_path))
    return config, replacements


# --- FastAPI Server ---
def create_app(config, replacements, counter=None, fetch=load_status_page):
    api = FastAPI(title="nc-exporter")
    api.state.counter = counter or RequestCounter()

    @api.get("/healthz")
    def health():
        return {"status": "ok"}

    @api.get("/", response_class=PlainTextResponse)
    @api.get("/metrics", response_class=PlainTextResponse)
    def metrics():
        pipeline = ScrapePipeline(config, replacements, api.state.counter, fetch=fetch)
        try:
            result = pipeline.run()
        except FetchError as e:
            return PlainTextResponse(f"# failed to load the Nextcloud status page: {e}\n", status_code=502)
        except ParseError as e:
            return PlainTextResponse(f"# failed to parse the Nextcloud status page: {e}\n", status_code=502)
        return PlainTextResponse(render_exposition(result), media_type=CONTENT_TYPE)

    return api


def serve(config_path=CONFIG_PATH, host=EXPORTER_HOST, port=EXPORTER_PORT):
    try:
        config, replacements = load_runtime(config_path)
    except ConfigError as e:
        logger.critical(f"[main] Invalid configuration: {e}")
        sys.exit(1)

    api = create_app(config, replacements)
    logger.info(f"[main] Serving Nextcloud metrics on {host}:{port} for {config.nc_url}")
    uvicorn.run(api, host=host, port=port)


def main():
    configure_logging()
    configure_sentry()
    serve()


if __name__ == "__main__":
    main()
