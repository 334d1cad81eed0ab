"""Tests for the HTTP endpoints."""

import json


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestDiffEndpoints:
    def test_unified(self, client):
        response = client.post("/api/diff/unified", json={"old_text": "foo", "new_text": "bar"})
        assert response.status_code == 200
        char_diffs = [{"kind": "delete", "text": "foo"}, {"kind": "insert", "text": "bar"}]
        assert response.json() == {
            "lines": [
                {"kind": "delete", "content": "foo", "old_line_number": 1, "char_diffs": char_diffs},
                {"kind": "insert", "content": "bar", "new_line_number": 1, "char_diffs": char_diffs},
            ],
            "old_text": "foo",
            "new_text": "bar",
        }

    def test_unified_defaults_to_empty_texts(self, client):
        response = client.post("/api/diff/unified", json={})
        assert response.status_code == 200
        assert response.json()["lines"] == []

    def test_side_by_side(self, client):
        response = client.post("/api/diff/side-by-side", json={"old_text": "a\nb", "new_text": "a"})
        assert response.status_code == 200
        body = response.json()
        assert body["left"] == [
            {"line_number": 1, "content": "a", "kind": "equal"},
            {"line_number": 2, "content": "b", "kind": "delete"},
        ]
        assert body["right"] == [
            {"line_number": 1, "content": "a", "kind": "equal"},
            {"line_number": 2, "content": "", "kind": "empty"},
        ]

    def test_inline(self, client):
        response = client.post("/api/diff/inline", json={"old_text": "x = 1", "new_text": "x = 2"})
        assert response.status_code == 200
        (line,) = response.json()["lines"]
        assert line["kind"] == "equal"
        assert line["content"] == "x = 2"
        assert line["old_line_number"] == 1
        assert line["new_line_number"] == 1
        assert {"kind": "insert", "text": "2"} in line["char_diffs"]

    def test_render(self, client):
        response = client.post("/api/diff/render", json={"old_text": "a\nb", "new_text": "a\nc"})
        assert response.json() == {"text": " a\n-b\n+c"}

    def test_patch(self, client):
        response = client.post(
            "/api/diff/patch",
            json={"old_text": "a\n", "new_text": "b\n", "from_file": "x.txt", "to_file": "y.txt"},
        )
        assert response.status_code == 200
        assert response.json()["patch"].startswith("--- x.txt\n+++ y.txt\n")

    def test_invalid_body(self, client):
        response = client.post("/api/diff/unified", json={"old_text": ["not", "text"]})
        assert response.status_code == 422

    def test_negative_context_lines(self, client):
        response = client.post("/api/diff/patch", json={"context_lines": -1})
        assert response.status_code == 422


class TestConfigEndpoints:
    def test_get_config(self, client):
        response = client.get("/api/config")
        assert response.status_code == 200
        assert response.json()["diff"] == {"timeout": 0.2}

    def test_update_config(self, client, config_dir):
        response = client.put("/api/config", json={"diff": {"timeout": 1.0}})
        assert response.status_code == 200
        saved = json.loads((config_dir / "config.json").read_text())
        assert saved["diff"]["timeout"] == 1.0
        assert client.get("/api/config").json()["diff"]["timeout"] == 1.0

    def test_negative_timeout_is_rejected(self, client):
        response = client.put("/api/config", json={"diff": {"timeout": -1}})
        assert response.status_code == 400

    def test_non_numeric_timeout_is_rejected(self, client):
        response = client.put("/api/config", json={"diff": {"timeout": "fast"}})
        assert response.status_code == 400


class TestBrokenSettings:
    def test_bad_timeout_in_file_still_serves_diffs(self, client, config_dir):
        (config_dir / "config.json").write_text(json.dumps({"diff": {"timeout": "fast"}}))
        response = client.post("/api/diff/unified", json={"old_text": "a", "new_text": "b"})
        assert response.status_code == 200
        assert [line["kind"] for line in response.json()["lines"]] == ["delete", "insert"]
