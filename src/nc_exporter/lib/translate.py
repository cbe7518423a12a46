"""
translate.py
- Flattens a parsed status tree into Prometheus metrics.
- Metric names join the element path below the document element with "_"
  behind a fixed prefix: <ocs><data><system><cpuload> -> nc_data_system_cpuload.
- Text values that are not numbers go through the replacement table
  (yes -> 1, no -> 0 and the like) or are dropped.
"""

import re

from loguru import logger

from nc_exporter.core.config import METRIC_PREFIX
from nc_exporter.core.metric import Metric

_INVALID_NAME_CHARS = re.compile(r"[^a-z0-9_]")


def path_to_metric_name(path, prefix=METRIC_PREFIX):
    """
    Join XML element names into a valid metric name.

    >>> path_to_metric_name(["nextcloud", "system", "cpuload"])
    'nc_nextcloud_system_cpuload'
    """
    parts = [prefix, *path] if prefix else list(path)
    return _INVALID_NAME_CHARS.sub("_", "_".join(parts).lower())


def to_number(text, replacements):
    """
    Convert a leaf text value to a float.

    Returns None if the text is neither a number nor a key of the
    replacement table.
    """
    try:
        return float(text)
    except ValueError:
        pass
    return replacements.lookup(text)


class _NameRegistry:
    """Hands out unique names; repeated names get a running number suffix."""

    def __init__(self, reserved=()):
        self.taken = set(reserved)
        self.counts = {}

    def claim(self, base):
        count = self.counts.get(base, 0) + 1
        self.counts[base] = count
        name = base if count == 1 else f"{base}{count}"
        while name in self.taken:
            count += 1
            self.counts[base] = count
            name = f"{base}{count}"
        self.taken.add(name)
        return name


def _walk(node, path, replacements, registry, metrics):
    for child in node.children:
        child_path = path + [child.name]
        if child.children:
            _walk(child, child_path, replacements, registry, metrics)
            continue
        if child.text is None:
            continue

        # child_path[0] is the document element
        base = path_to_metric_name(child_path[1:])
        value = to_number(child.text, replacements)
        if value is None:
            logger.debug(f"IGNORED METRIC: {base} {child.text!r}")
            continue

        metrics.append(Metric(
            name=registry.claim(base),
            value=value,
            help=f"Nextcloud status value {'/'.join(child_path)}",
        ))


def translate_status_tree(root, replacements, reserved=()):
    """
    Translate a status tree into metrics, in document order.

    Args:
        root (StatusNode): Parsed document element; its own name is not part of metric names.
        replacements (ReplacementTable): Text -> number table.
        reserved (Iterable[str]): Names that must not be produced (self-metrics).

    Returns:
        list[Metric]: Gauges with unique names.
    """
    metrics = []
    _walk(root, [root.name], replacements, _NameRegistry(reserved), metrics)
    return metrics
