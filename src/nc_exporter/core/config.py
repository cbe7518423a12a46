"""
config.py
- Defines process-wide configuration values derived from environment variables.
- Holds the ExporterConfig loaded from the exporter YAML file (see config_loader.py).
"""

import os
from dataclasses import dataclass

# --- Runtime Behavior Flags ---
DEBUG = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

# --- HTTP Listener ---
EXPORTER_HOST = os.getenv("EXPORTER_HOST", "0.0.0.0")
EXPORTER_PORT = int(os.getenv("EXPORTER_PORT", "9205"))

# --- Error Reporting ---
SENTRY_DSN = os.getenv("SENTRY_DSN")

# --- Config Paths ---
CONFIG_PATH = os.getenv("NCE_CONFIG", "/etc/nc-exporter/nc_exporter.yml")
DEFAULT_REPLACEMENT_CONFIG = "replacements.json"

# --- Metric Naming ---
METRIC_PREFIX = "nc"
DEFAULT_FETCH_TIMEOUT = 10.0  # seconds


@dataclass(frozen=True)
class ExporterConfig:
    nc_url: str = ""
    nc_user: str = ""
    nc_password: str = ""
    nc_replacement_config: str = DEFAULT_REPLACEMENT_CONFIG
    nc_timeout: float = DEFAULT_FETCH_TIMEOUT

    def problems(self):
        """Return human-readable warnings about empty required settings."""
        found = []
        if not self.nc_user or not self.nc_password:
            found.append("Nextcloud user credentials are empty.")
        if not self.nc_url:
            found.append("Nextcloud status page URL is empty.")
        return found

    def __str__(self):
        return (
            "nce config:\n"
            f'nc_url = "{self.nc_url}"\n'
            f'nc_user = "{self.nc_user}"\n'
            f'nc_password = "{"*****" if self.nc_password else ""}"\n'
            f'nc_replacement_config = "{self.nc_replacement_config}"\n'
            f"nc_timeout = {self.nc_timeout}"
        )
