"""
replacements.py
- Immutable string -> number table used to turn textual status values
  (yes/no, ok/none, ...) into numbers.
- Built once at startup and shared read-only by all scrape requests.
"""

from types import MappingProxyType

from nc_exporter.core.errors import ConfigError


class ReplacementTable:
    def __init__(self, values=None):
        self._values = MappingProxyType(dict(values or {}))

    @classmethod
    def from_config(cls, data):
        """
        Build a table from the parsed replacement JSON document.

        Args:
            data (dict): Document of shape {"values": {<string>: <number>, ...}}.

        Raises:
            ConfigError: if the document or one of its values has the wrong type.
        """
        if not isinstance(data, dict):
            raise ConfigError("Replacement config must be a JSON object.")

        raw = data.get("values", {})
        if not isinstance(raw, dict):
            raise ConfigError('Replacement config "values" must be a JSON object.')

        values = {}
        for key, value in raw.items():
            # bool is an int subclass, but true/false are not valid replacements
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"Replacement for {key!r} is not a number: {value!r}")
            values[key] = float(value)
        return cls(values)

    @property
    def values(self):
        return self._values

    def lookup(self, text):
        """Return the configured number for `text` (exact match) or None."""
        return self._values.get(text)

    def __len__(self):
        return len(self._values)

    def __contains__(self, text):
        return text in self._values

    def __repr__(self):
        return f"ReplacementTable({dict(self._values)!r})"
