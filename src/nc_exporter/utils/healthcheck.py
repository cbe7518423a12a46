#!/usr/bin/env python3
"""
healthcheck.py
- Basic healthcheck script for Docker HEALTHCHECK.
- Returns exit code 0 if the exporter answers on /healthz, 1 if not.
"""

import sys

import requests

from nc_exporter.core.config import EXPORTER_PORT


def is_healthy(port=EXPORTER_PORT, timeout=2):
    try:
        response = requests.get(f"http://127.0.0.1:{port}/healthz", timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def main():
    if is_healthy():
        sys.exit(0)  # Healthy
    else:
        print("❌ Healthcheck failed: exporter is not answering on /healthz")
        sys.exit(1)  # Unhealthy


if __name__ == "__main__":
    main()
