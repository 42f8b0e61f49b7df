"""Tests for the comparison HTTP routes."""

import pytest
from fastapi.testclient import TestClient

from propcompare.api.app import app
from propcompare.api.deps import get_scoring_options
from propcompare.models.comparison import ScoringOptions


@pytest.fixture
def client():
    return TestClient(app)


def _property(property_id: str, price: int | str, living_area: int = 1500, **extra) -> dict:
    payload = {
        "id": property_id,
        "price": price,
        "living_area": living_area,
        "location": {"city": "Austin", "state": "TX"},
    }
    payload.update(extra)
    return payload


class TestScoreRoute:
    def test_price_only(self, client):
        resp = client.post("/api/v1/comparison/score", json={
            "properties": [_property("costly", 400000), _property("cheap", 300000)],
            "criteria": {"price": True},
        })
        assert resp.status_code == 200
        body = resp.json()
        assert [r["property_id"] for r in body["results"]] == ["cheap", "costly"]
        assert body["results"][0]["total_score"] == 100
        assert body["results"][0]["criteria_scores"] == {"price": 100}
        assert body["results"][1]["total_score"] == 0
        assert body["winner_id"] == "cheap"
        assert body["loser_id"] == "costly"

    def test_weighted_criteria_objects(self, client):
        resp = client.post("/api/v1/comparison/score", json={
            "properties": [
                _property("cheap-small", 300000, 1200),
                _property("pricey-large", 400000, 2400),
            ],
            "criteria": {
                "price": {"enabled": True, "weight": 0.1},
                "size": {"enabled": True, "weight": 0.9},
            },
        })
        assert resp.status_code == 200
        assert resp.json()["winner_id"] == "pricey-large"

    def test_property_detail(self, client):
        resp = client.post("/api/v1/comparison/score", json={
            "properties": [
                _property("a", 280000, condition="good", features=["Pool"]),
                _property("b", 420000, condition="fair"),
            ],
        })
        assert resp.status_code == 200
        detail = {p["property_id"]: p for p in resp.json()["properties"]}
        assert detail["b"]["price_comparison"]["percentage_difference"] == pytest.approx(20.0)
        assert detail["a"]["metrics"]["condition"] == 100.0
        assert detail["a"]["location_comparison"] is None

    def test_single_property_rejected(self, client):
        resp = client.post("/api/v1/comparison/score", json={
            "properties": [_property("a", 300000)],
        })
        assert resp.status_code == 400
        assert "between 2 and 10" in resp.json()["detail"]

    def test_negative_price_rejected(self, client):
        resp = client.post("/api/v1/comparison/score", json={
            "properties": [_property("a", 300000), _property("b", -5)],
        })
        assert resp.status_code == 400
        assert "'b'" in resp.json()["detail"]

    def test_out_of_range_price_rejected(self, client):
        resp = client.post("/api/v1/comparison/score", json={
            "properties": [_property("a", 300000), _property("b", "1e29")],
        })
        assert resp.status_code == 400
        assert "price" in resp.json()["detail"]

    def test_all_disabled_rejected(self, client):
        resp = client.post("/api/v1/comparison/score", json={
            "properties": [_property("a", 300000), _property("b", 400000)],
            "criteria": {"price": False, "size": False},
        })
        assert resp.status_code == 400

    def test_unknown_condition_rejected(self, client):
        resp = client.post("/api/v1/comparison/score", json={
            "properties": [_property("a", 300000, condition="pristine"), _property("b", 400000)],
        })
        assert resp.status_code == 400
        assert "condition" in resp.json()["detail"]

    def test_options_dependency(self, client):
        app.dependency_overrides[get_scoring_options] = lambda: ScoringOptions(max_cohort_size=2)
        try:
            resp = client.post("/api/v1/comparison/score", json={
                "properties": [_property(f"p{i}", 300000 + i) for i in range(3)],
            })
        finally:
            app.dependency_overrides.clear()
        assert resp.status_code == 400


class TestCriteriaDefaults:
    def test_lists_groups_and_dimensions(self, client):
        resp = client.get("/api/v1/comparison/criteria/defaults")
        assert resp.status_code == 200
        criteria = {c["key"]: c for c in resp.json()}
        assert criteria["financial"]["dimensions"] == ["investment", "cashFlow", "appreciation"]
        assert criteria["price"]["default_weight"] == 1.0
        assert criteria["price"]["fallback_weight"] == pytest.approx(0.15)
        assert criteria["financial"]["default_weight"] == 3.0
        assert criteria["features"]["default_weight"] == 1.0
        assert criteria["propertyType"]["dimensions"] == []


def test_health(client):
    resp = client.get("/health")
    assert resp.json() == {"status": "ok"}
