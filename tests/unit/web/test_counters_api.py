"""HTTP tests for the counter endpoints."""

import re
import xml.etree.ElementTree as ET
from uuid import UUID, uuid4

from doubles import install_counter_service
from fastapi.testclient import TestClient
from structlog.testing import capture_logs

from hitbadge.app import App
from hitbadge.web.server import create_fastapi_app

SVG_NS = "{http://www.w3.org/2000/svg}"
ID_RE = re.compile(r"Your new unique ID is: ([0-9a-f-]{36})")


def new_counter_id(client) -> UUID:
    response = client.get("/")
    match = ID_RE.search(response.text)
    assert match, response.text
    return UUID(match.group(1))


def badge_message(svg: str) -> str:
    root = ET.fromstring(svg)
    texts = [el.text for el in root.iter(f"{SVG_NS}text") if el.get("aria-hidden") != "true"]
    return texts[-1]


class TestCreateCounter:
    def test_returns_onboarding_message(self, client, memory_counters):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        counter_id = UUID(ID_RE.search(response.text).group(1))
        assert f"visit: /{counter_id}" in response.text
        assert memory_counters.counts == {counter_id: 0}

    def test_storage_failure_is_500_with_message(self, client, memory_counters):
        memory_counters.failure = "connection refused"

        response = client.get("/")

        assert response.status_code == 500
        assert response.text == "connection refused"


class TestHitCounter:
    def test_end_to_end(self, client):
        """Test create, two visits, and an unknown id."""
        counter_id = new_counter_id(client)

        first = client.get(f"/{counter_id}")
        assert first.status_code == 200
        assert first.headers["content-type"] == "image/svg+xml"
        assert badge_message(first.text) == "1"

        second = client.get(f"/{counter_id}")
        assert badge_message(second.text) == "2"

        missing = client.get(f"/{uuid4()}")
        assert missing.status_code == 404
        assert missing.text == "UUID not found"

    def test_no_cache_header(self, client):
        counter_id = new_counter_id(client)

        assert client.get(f"/{counter_id}").headers["cache-control"] == "no-cache"

    def test_query_parameters_shape_badge(self, client):
        counter_id = new_counter_id(client)

        response = client.get(f"/{counter_id}", params={"style": "for-the-badge", "label": "views", "color": "red"})

        root = ET.fromstring(response.text)
        assert root.get("height") == "28"
        assert root.get("aria-label") == "VIEWS: 1"
        assert "#e05d44" in response.text

    def test_unknown_query_parameters_ignored(self, client):
        counter_id = new_counter_id(client)

        response = client.get(f"/{counter_id}", params={"cacheSeconds": "60", "style": "nope"})

        assert response.status_code == 200
        assert ET.fromstring(response.text).get("height") == "20"

    def test_malformed_id_is_400(self, client, memory_counters):
        response = client.get("/not-a-uuid")

        assert response.status_code == 400
        assert response.text.startswith("Invalid URL")
        assert memory_counters.counts == {}

    def test_storage_failure_is_500(self, client, memory_counters):
        counter_id = new_counter_id(client)
        memory_counters.failure = "timed out waiting for a pooled connection"

        with capture_logs() as logs:
            response = client.get(f"/{counter_id}")

        assert response.status_code == 500
        assert response.text == "timed out waiting for a pooled connection"
        assert [log["event"] for log in logs] == ["storage_unavailable"]


class TestLifecycle:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_services_started_and_stopped(self, config, memory_counters):
        app = App(config)
        install_counter_service(app, memory_counters)
        with TestClient(create_fastapi_app(app, config)):
            assert memory_counters.started
        assert memory_counters.stopped
