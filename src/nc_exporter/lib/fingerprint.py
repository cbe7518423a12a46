"""
fingerprint.py
- Hashes the set of translated metric names into a small number.
- A step in nc_metric_names_hash means the status page gained, lost or renamed
  metrics, which may require adjusting dashboards or alerts.
"""

import hashlib

METRIC_NAMES_HASH = "nc_metric_names_hash"
HASH_PREFIX_BYTES = 3


def metric_names_hash(names):
    """
    Return the first bytes of an MD5 over the sorted, deduplicated names as an int.

    Each name is followed by a newline before hashing, so the result only
    depends on the set of names and never on their order or their values.
    """
    text = "".join(f"{name}\n" for name in sorted(set(names)))
    digest = hashlib.md5(text.encode("utf-8")).digest()
    return int.from_bytes(digest[:HASH_PREFIX_BYTES], "big")
