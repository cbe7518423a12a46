#!/usr/bin/env python3
"""
entrypoint.py
- Command-line entrypoint of the exporter.
- Usage:
    nc-exporter [serve|scrape|check-config]

    serve         Run the HTTP exporter (default)
    scrape        Run a single scrape and print the metrics to stdout
    check-config  Load the configuration and report problems
"""

import signal
import sys

from loguru import logger

from nc_exporter.core.config import CONFIG_PATH
from nc_exporter.core.errors import ConfigError, FetchError, ParseError
from nc_exporter.core.state import RequestCounter
from nc_exporter.lib.exposition import render_exposition
from nc_exporter.lib.status_page import load_status_page
from nc_exporter.main import configure_logging, configure_sentry, load_runtime, serve
from nc_exporter.runner.scrape import ScrapePipeline


def usage():
    print("Usage: nc-exporter <command>")
    print("Available commands:")
    print("  serve         Run the HTTP exporter (default)")
    print("  scrape        Run a single scrape and print the metrics")
    print("  check-config  Load the configuration and report problems")
    return 1


def handle_exit(signum, frame):
    logger.info("[entrypoint] Received shutdown signal. Exiting...")
    sys.exit(0)


def scrape_once(config_path=CONFIG_PATH, fetch=load_status_page):
    try:
        config, replacements = load_runtime(config_path)
    except ConfigError as e:
        logger.error(f"[entrypoint] Invalid configuration: {e}")
        return 1

    try:
        metrics = ScrapePipeline(config, replacements, RequestCounter(), fetch=fetch).run()
    except (FetchError, ParseError) as e:
        print(f"Scrape failed: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(render_exposition(metrics))
    return 0


def check_config(config_path=CONFIG_PATH):
    try:
        config, replacements = load_runtime(config_path)
    except ConfigError as e:
        print(f"❌ {e}")
        return 1

    print(config)
    print(f"replacement values = {len(replacements)}")
    problems = config.problems()
    for problem in problems:
        print(f"❌ {problem}")
    return 1 if problems else 0


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) > 1:
        return usage()

    command = argv[0] if argv else "serve"
    configure_logging()

    if command == "serve":
        signal.signal(signal.SIGINT, handle_exit)
        signal.signal(signal.SIGTERM, handle_exit)
        configure_sentry()
        serve()
        return 0
    if command == "scrape":
        return scrape_once()
    if command == "check-config":
        return check_config()

    print(f"❌ Unknown command: {command}")
    return usage()


if __name__ == "__main__":
    sys.exit(main())
