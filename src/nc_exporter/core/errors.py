"""
errors.py
- Exception types raised by the exporter.
- FetchError and ParseError abort a single scrape request.
- ConfigError is raised while loading configuration at startup.
"""


class NcExporterError(Exception):
    """Base class for all exporter errors."""


class FetchError(NcExporterError):
    """The status page could not be loaded (network, timeout, non-2xx)."""


class ParseError(NcExporterError):
    """The status page body is not well-formed XML."""


class ConfigError(NcExporterError):
    """The exporter config or the replacement table is malformed."""
