"""
metric.py
- Value type shared by the translator, the scrape runner and the exposition renderer.
"""

from dataclasses import dataclass
from typing import Optional

GAUGE = "gauge"
COUNTER = "counter"


@dataclass(frozen=True)
class Metric:
    name: str
    value: float
    kind: str = GAUGE
    help: Optional[str] = None
