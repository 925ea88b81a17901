"""
test_my_service.py — Tests for the greeting and info routes of my service.

Verifies the fixed greeting, that /greet/{name} echoes the decoded path
segment without escaping, and that /info is a static two-key map.

Called by: pytest
Depends on: lab_services.app.main (create_my_service_app)
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


class TestHello:
    def test_hello(self, my_service_client: TestClient):
        resp = my_service_client.get("/hello")
        assert resp.status_code == 200
        assert resp.text == "Hello, Spring Boot Microservice!"
        assert resp.headers["content-type"].startswith("text/plain")


class TestGreet:
    def test_greet_alice(self, my_service_client: TestClient):
        resp = my_service_client.get("/greet/Alice")
        assert resp.status_code == 200
        assert resp.text == "Hello, Alice!"

    @pytest.mark.parametrize(
        "segment, expected",
        [
            ("Bob", "Hello, Bob!"),
            ("Mary%20Jane", "Hello, Mary Jane!"),
            ("%3Cb%3Ehi", "Hello, <b>hi!"),
            ("Tom%20%26%20Jerry", "Hello, Tom & Jerry!"),
            ("Zo%C3%AB", "Hello, Zoë!"),
            ("O'Brien", "Hello, O'Brien!"),
            ("12345", "Hello, 12345!"),
        ],
    )
    def test_greet_substitutes_segment_verbatim(self, my_service_client: TestClient, segment, expected):
        resp = my_service_client.get(f"/greet/{segment}")
        assert resp.status_code == 200
        assert resp.text == expected

    def test_greet_does_not_escape_markup(self, my_service_client: TestClient):
        resp = my_service_client.get("/greet/%3Cscript%3E")
        assert "&lt;" not in resp.text
        assert resp.text == "Hello, <script>!"

    def test_greet_empty_name(self, my_service_client: TestClient):
        resp = my_service_client.get("/greet/")
        assert resp.status_code == 200
        assert resp.text == "Hello, !"

    def test_greet_extra_segment_is_404(self, my_service_client: TestClient):
        assert my_service_client.get("/greet/a/b").status_code == 404


class TestInfo:
    def test_info_payload(self, my_service_client: TestClient):
        resp = my_service_client.get("/info")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/json")
        assert resp.json() == {"version": "1.0.0", "description": "My Spring Boot Microservice"}

    def test_info_has_exactly_two_keys(self, my_service_client: TestClient):
        assert set(my_service_client.get("/info").json()) == {"version", "description"}

    def test_info_is_identical_across_calls(self, my_service_client: TestClient):
        payloads = [my_service_client.get("/info").json() for _ in range(3)]
        assert payloads[0] == payloads[1] == payloads[2]


def test_balance_not_exposed(my_service_client: TestClient):
    assert my_service_client.get("/balance").status_code == 404


def test_openapi_lists_only_own_routes(my_service_client: TestClient):
    paths = set(my_service_client.get("/openapi.json").json()["paths"])
    assert paths == {"/hello", "/greet/", "/greet/{name}", "/info"}


def test_greet_without_trailing_slash_redirects_to_empty_greeting(my_service_client: TestClient):
    resp = my_service_client.get("/greet", follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"].endswith("/greet/")

    followed = my_service_client.get("/greet")
    assert followed.status_code == 200
    assert followed.text == "Hello, !"
