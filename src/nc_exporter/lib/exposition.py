"""
exposition.py
- Renders metrics in the Prometheus text exposition format (version 0.0.4).
"""

import math

CONTENT_TYPE = "text/plain; version=0.0.4"


def format_value(value):
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def _escape_help(text):
    return text.replace("\\", "\\\\").replace("\n", "\\n")


def render_exposition(metrics):
    """Render metrics sorted by name, each with HELP/TYPE headers."""
    lines = []
    for metric in sorted(metrics, key=lambda m: m.name):
        if metric.help:
            lines.append(f"# HELP {metric.name} {_escape_help(metric.help)}")
        lines.append(f"# TYPE {metric.name} {metric.kind}")
        lines.append(f"{metric.name} {format_value(float(metric.value))}")
    return "\n".join(lines) + "\n"
