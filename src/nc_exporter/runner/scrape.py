#!/usr/bin/env python3
"""
scrape.py
- Runs one scrape: load the status page, parse it, translate it into metrics.
- Times each phase and appends the exporter's own metrics:
    - rust_nce_load_duration / rust_nce_parse_duration / rust_nce_total_duration
    - rust_nce_request_start_count / rust_nce_request_end_count
    - nc_metric_names_hash
- A new ScrapePipeline is built for every request; only the config, the
  replacement table and the RequestCounter are shared.
"""

import enum
import time
from dataclasses import dataclass

from loguru import logger

from nc_exporter.core.metric import COUNTER, GAUGE, Metric
from nc_exporter.lib.fingerprint import METRIC_NAMES_HASH, metric_names_hash
from nc_exporter.lib.status_page import load_status_page
from nc_exporter.lib.status_tree import parse_status_document
from nc_exporter.lib.translate import translate_status_tree

# --- Self Metrics ---
PARSE_DURATION = "rust_nce_parse_duration"
LOAD_DURATION = "rust_nce_load_duration"
TOTAL_DURATION = "rust_nce_total_duration"
REQUEST_START_COUNT = "rust_nce_request_start_count"
REQUEST_END_COUNT = "rust_nce_request_end_count"

SELF_METRIC_NAMES = (
    PARSE_DURATION,
    LOAD_DURATION,
    TOTAL_DURATION,
    REQUEST_START_COUNT,
    REQUEST_END_COUNT,
    METRIC_NAMES_HASH,
)


class ScrapePhase(enum.Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    PARSING = "parsing"
    TRANSLATING = "translating"
    DONE = "done"
    FAILED = "failed"


@dataclass
class ScrapeTimings:
    load_duration: float = 0.0
    parse_duration: float = 0.0
    total_duration: float = 0.0


class ScrapePipeline:
    def __init__(self, config, replacements, counter, fetch=load_status_page):
        self.config = config
        self.replacements = replacements
        self.counter = counter
        self.fetch = fetch
        self.phase = ScrapePhase.IDLE
        self.timings = ScrapeTimings()

    def _enter(self, phase):
        logger.debug(f"[scrape] {self.phase.value} -> {phase.value}")
        self.phase = phase

    def run(self):
        """
        Execute the scrape.

        Returns:
            list[Metric]: Translated metrics followed by the self-metrics.

        Raises:
            FetchError, ParseError: the scrape failed; no metrics are produced.
        """
        try:
            return self._run()
        except Exception as e:
            logger.error(f"[scrape] Scrape failed while {self.phase.value}: {e}")
            self.phase = ScrapePhase.FAILED
            raise

    def _run(self):
        self._enter(ScrapePhase.FETCHING)
        self.counter.count_start()
        started = time.perf_counter()
        try:
            raw = self.fetch(
                self.config.nc_url,
                self.config.nc_user,
                self.config.nc_password,
                timeout=self.config.nc_timeout,
            )
        finally:
            self.timings.load_duration = time.perf_counter() - started

        self._enter(ScrapePhase.PARSING)
        phase_started = time.perf_counter()
        root = parse_status_document(raw)
        self.timings.parse_duration = time.perf_counter() - phase_started

        self._enter(ScrapePhase.TRANSLATING)
        metrics = translate_status_tree(root, self.replacements, reserved=SELF_METRIC_NAMES)
        names_hash = metric_names_hash(m.name for m in metrics)
        self.timings.total_duration = time.perf_counter() - started

        start_count, end_count = self.counter.count_end()
        self._enter(ScrapePhase.DONE)
        logger.debug(
            f"[scrape] {len(metrics)} metrics in {self.timings.total_duration:.3f}s "
            f"(load={self.timings.load_duration:.3f}s, parse={self.timings.parse_duration:.3f}s)"
        )

        return metrics + [
            Metric(PARSE_DURATION, self.timings.parse_duration, GAUGE, "Seconds spent parsing the status page"),
            Metric(LOAD_DURATION, self.timings.load_duration, GAUGE, "Seconds spent loading the status page"),
            Metric(TOTAL_DURATION, self.timings.total_duration, GAUGE, "Seconds spent on the whole scrape"),
            Metric(REQUEST_START_COUNT, float(start_count), COUNTER, "Scrape requests started"),
            Metric(REQUEST_END_COUNT, float(end_count), COUNTER, "Scrape requests finished successfully"),
            Metric(
                METRIC_NAMES_HASH,
                float(names_hash),
                GAUGE,
                "First digits of a hash of all extracted metric names; "
                "changes when metric names or their number change",
            ),
        ]
