# This project was developed with assistance from AI tools.
"""Tests for health and root endpoints and error formatting."""

from parkqueue import __version__


def test_health_returns_api_item(client):
    response = client.get("/health/")
    assert response.status_code == 200
    data = response.json()
    api = next(item for item in data if item["name"] == "API")
    assert api["status"] == "healthy"
    assert api["version"] == __version__


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "ParkQueue" in response.json()["message"]


def test_unknown_route_is_problem_details(client):
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    body = response.json()
    assert body["title"] == "Not Found"
    assert body["request_id"]
