import pytest
from loguru import logger

from nc_exporter.lib.replacements import ReplacementTable

STORAGE_XML = b"""<storage>
    <num_users>42</num_users>
    <num_files>149545</num_files>
    <num_storages>66</num_storages>
    <num_storages_local>1</num_storages_local>
    <num_storages_home>65</num_storages_home>
    <num_storages_other>0</num_storages_other>
</storage>"""


@pytest.fixture
def log_messages():
    """Collect loguru messages (DEBUG and up) emitted during the test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record), level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def replacements():
    return ReplacementTable({"ok": 1, "yes": 1, "OK": 1, "none": 0, "no": 0})


@pytest.fixture
def storage_xml():
    return STORAGE_XML
