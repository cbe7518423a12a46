from fastapi.testclient import TestClient

from nc_exporter.core.config import ExporterConfig
from nc_exporter.core.errors import FetchError
from nc_exporter.lib.replacements import ReplacementTable
from nc_exporter.main import create_app

CONFIG = ExporterConfig(nc_url="https://cloud/info", nc_user="admin", nc_password="secret")

STATUS_XML = b"""<?xml version="1.0"?>
<ocs>
  <meta><status>ok</status><statuscode>200</statuscode><message>OK</message></meta>
  <data>
    <nextcloud>
      <system>
        <version>27.1.3.2</version>
        <maintenance>yes</maintenance>
        <cpuload><element>0.5</element><element>0.25</element></cpuload>
      </system>
    </nextcloud>
  </data>
</ocs>"""


def client_for(fetch, table=None):
    return TestClient(create_app(CONFIG, table or ReplacementTable({"ok": 1, "yes": 1}), fetch=fetch))


def test_metrics_endpoint_serves_exposition_text():
    client = client_for(lambda url, user, password, timeout: STATUS_XML)
    response = client.get("/metrics")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain; version=0.0.4")
    lines = response.text.splitlines()
    assert "nc_meta_status 1" in lines
    assert "nc_meta_statuscode 200" in lines
    assert "nc_data_nextcloud_system_maintenance 1" in lines
    assert "nc_data_nextcloud_system_cpuload_element 0.5" in lines
    assert "nc_data_nextcloud_system_cpuload_element2 0.25" in lines
    assert "rust_nce_request_start_count 1" in lines
    assert "rust_nce_request_end_count 1" in lines
    assert "# TYPE rust_nce_request_end_count counter" in lines
    assert not any(line.startswith("nc_data_nextcloud_system_version ") for line in lines)
    assert not any(line.startswith("nc_meta_message ") for line in lines)
    assert any(line.startswith("nc_metric_names_hash ") for line in lines)
    for name in ("rust_nce_parse_duration", "rust_nce_load_duration", "rust_nce_total_duration"):
        assert any(line.startswith(f"{name} ") for line in lines)


def test_root_path_also_scrapes():
    client = client_for(lambda url, user, password, timeout: STATUS_XML)
    assert client.get("/").status_code == 200
    assert "rust_nce_request_start_count 2" in client.get("/metrics").text


def test_fetch_failure_returns_502():
    def failing_fetch(url, user, password, timeout):
        raise FetchError("Nextcloud status page returned 401")

    response = client_for(failing_fetch).get("/metrics")
    assert response.status_code == 502
    assert "401" in response.text
    assert "rust_nce" not in response.text


def test_parse_failure_returns_502():
    response = client_for(lambda url, user, password, timeout: b"<html><body>").get("/metrics")
    assert response.status_code == 502
    assert "parse" in response.text


def test_healthz():
    response = client_for(lambda url, user, password, timeout: STATUS_XML).get("/healthz")
    assert response.json() == {"status": "ok"}
