"""Tests for the validation HTTP service."""

from fastapi.testclient import TestClient

from backend.app import app


class TestValidateEndpoint:
    def setup_method(self):
        self.client = TestClient(app)

    def test_valid_value(self):
        resp = self.client.post("/validate", json={"type": "post_code", "value": "SW1A 1AA"})
        assert resp.status_code == 200
        assert resp.json() == {
            "type": "post_code",
            "valid": True,
            "normalized_value": "SW1A 1AA",
        }

    def test_invalid_value(self):
        resp = self.client.post("/validate", json={"type": "message", "value": "hi <b>"})
        assert resp.status_code == 200
        assert resp.json()["valid"] is False

    def test_normalized_name(self):
        resp = self.client.post("/validate", json={"type": "name", "value": "O\\'Brien"})
        assert resp.json()["normalized_value"] == "O'Brien"

    def test_null_value(self):
        resp = self.client.post("/validate", json={"type": "url", "value": None})
        assert resp.status_code == 200
        assert resp.json()["valid"] is True

    def test_unknown_type(self):
        resp = self.client.post("/validate", json={"type": "NOT_A_TYPE", "value": "x"})
        assert resp.status_code == 400
        detail = resp.json()["detail"]
        assert len(detail["defined_types"]) == 21
        assert "NOT_A_TYPE" in detail["error"]

    def test_non_string_value(self):
        resp = self.client.post("/validate", json={"type": "post_code", "value": 75001})
        assert resp.status_code == 422
        assert "int" in resp.json()["detail"]["error"]


class TestBatchEndpoint:
    def setup_method(self):
        self.client = TestClient(app)

    def test_results_in_order(self):
        resp = self.client.post("/validate/batch", json={"items": [
            {"type": "post_code", "value": "75001"},
            {"type": "phone_number", "value": "call me"},
        ]})
        assert resp.status_code == 200
        data = resp.json()
        assert [r["valid"] for r in data["results"]] == [True, False]
        assert data["valid"] is False

    def test_failing_item_fails_request(self):
        resp = self.client.post("/validate/batch", json={"items": [
            {"type": "post_code", "value": "75001"},
            {"type": "bogus", "value": "x"},
        ]})
        assert resp.status_code == 400


class TestIntrospection:
    def setup_method(self):
        self.client = TestClient(app)

    def test_health(self):
        resp = self.client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["field_type_count"] == 21

    def test_types(self):
        resp = self.client.get("/types")
        types = {t["type"]: t for t in resp.json()}
        assert len(types) == 21
        assert types["message"]["polarity"] == "require_no_match"
        assert types["name"]["normalized"] is True
        assert types["webservice_key"]["ignore_case"] is True
