"""Tests for the score calculator web app.

Tests cover:
- GET / form rendering
- POST /score success, blank input and invalid format paths
- POST /api/score JSON contract
- Version, health and static endpoints
"""

import pytest
from starlette.testclient import TestClient

from wordle_score.web.server import ScoreServer


@pytest.fixture
def client() -> TestClient:
    """Create a test client for a fresh app."""
    server = ScoreServer()
    return TestClient(server.create_app())


class TestIndexPage:
    """Tests for GET /."""

    def test_renders_form(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert 'name="wordleText"' in response.text
        assert 'action="/score"' in response.text

    def test_no_result_or_error(self, client: TestClient) -> None:
        response = client.get("/")

        assert 'role="alert"' not in response.text
        assert 'id="total-score"' not in response.text

    def test_rules_list_miss_aliases(self, client: TestClient) -> None:
        response = client.get("/")

        assert "⬛ gray/black box (also ⬜ ⚫ 🟫): 2 points" in response.text


class TestScoreForm:
    """Tests for POST /score."""

    def test_renders_breakdown(self, client: TestClient, three_guess_share: str) -> None:
        response = client.post("/score", data={"wordleText": three_guess_share})

        assert response.status_code == 200
        assert '<span id="total-score">86</span>' in response.text
        assert "Wordle 123 3/6" in response.text
        assert "3 / 6 guesses" in response.text
        assert 'role="alert"' not in response.text

    def test_textarea_cleared_after_success(
        self, client: TestClient, failed_share: str
    ) -> None:
        response = client.post("/score", data={"wordleText": failed_share})

        assert '<span id="total-score">68</span>' in response.text
        assert "not solved" in response.text
        assert f">{failed_share}</textarea>" not in response.text

    @pytest.mark.parametrize("text", ["", "   \n  "])
    def test_blank_input(self, client: TestClient, text: str) -> None:
        response = client.post("/score", data={"wordleText": text})

        assert response.status_code == 200
        assert "Please provide Wordle share text" in response.text

    def test_missing_field(self, client: TestClient) -> None:
        response = client.post("/score", data={})

        assert response.status_code == 200
        assert "Please provide Wordle share text" in response.text

    def test_invalid_format_echoes_input(self, client: TestClient) -> None:
        response = client.post("/score", data={"wordleText": "Wordle 9 1/6 ⬛🟨🟩"})

        assert response.status_code == 200
        assert "Found 3 boxes total" in response.text
        assert "5, 10, 15, 20, 25, 30" in response.text
        assert "Wordle 9 1/6 ⬛🟨🟩</textarea>" in response.text

    def test_no_boxes_message(self, client: TestClient) -> None:
        response = client.post("/score", data={"wordleText": "hello"})

        assert "No box patterns found" in response.text


class TestScoreApi:
    """Tests for POST /api/score."""

    def test_returns_camel_case_breakdown(
        self, client: TestClient, three_guess_share: str
    ) -> None:
        response = client.post("/api/score", json={"wordleText": three_guess_share})

        assert response.status_code == 200
        data = response.json()
        assert data["attempts"] == 3
        assert data["guessPenalties"] == [0, 2, 4]
        assert data["totalScore"] == 86
        assert data["originalText"] == three_guess_share

    def test_invalid_format_is_400(self, client: TestClient) -> None:
        response = client.post("/api/score", json={"wordleText": "⬛" * 35})

        assert response.status_code == 400
        data = response.json()
        assert "Found 35 boxes total" in data["error"]
        assert data["boxCount"] == 35
        assert data["validTotals"] == [5, 10, 15, 20, 25, 30]

    def test_blank_input_is_400(self, client: TestClient) -> None:
        response = client.post("/api/score", json={"wordleText": " "})

        assert response.status_code == 400
        assert response.json()["error"] == "Please provide Wordle share text"

    def test_non_string_input_is_400(self, client: TestClient) -> None:
        response = client.post("/api/score", json={"wordleText": 42})

        assert response.status_code == 400

    def test_bad_json_is_400(self, client: TestClient) -> None:
        response = client.post(
            "/api/score",
            content=b"not json",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert "JSON" in response.json()["error"]

    def test_non_utf8_body_is_400(self, client: TestClient) -> None:
        response = client.post(
            "/api/score",
            content=b"\xff\xfe{",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert "JSON" in response.json()["error"]


class TestMiscEndpoints:
    """Tests for version, health and static assets."""

    def test_version(self, client: TestClient) -> None:
        from wordle_score import __version__

        response = client.get("/api/version")

        assert response.status_code == 200
        assert response.json() == {"version": __version__}

    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "ok"}

    def test_static_css(self, client: TestClient) -> None:
        response = client.get("/static/css/style.css")

        assert response.status_code == 200
        assert "text/css" in response.headers["content-type"]

    def test_static_js(self, client: TestClient) -> None:
        response = client.get("/static/js/app.js")

        assert response.status_code == 200
