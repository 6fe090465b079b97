"""Tests for the HTTP decode service."""

import pytest
from fastapi.testclient import TestClient


def test_decode_uncompressed(client: TestClient) -> None:
    response = client.post("/decode", json={"payload": "!4903.50N/07201.75W-"})
    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    position = body["position"]
    assert position["latitude"] == pytest.approx(49.05833, abs=1e-5)
    assert position["longitude"] == pytest.approx(-72.02917, abs=1e-5)
    assert position["symbol_table"] == "/"
    assert position["symbol_code"] == "-"
    assert position["ambiguity"] == 0
    assert position["altitude"] == -1
    assert position["dms"] == "4903.50N 07201.75W"
    assert position["decimal"] == "49.05833, -72.02917"


def test_decode_mic_e(client: TestClient) -> None:
    response = client.post(
        "/decode",
        json={"payload": "`dYgl([>/", "destination": "490S5P-9"},
    )
    assert response.status_code == 200
    assert response.json()["position"]["symbol_code"] == ">"


def test_decode_compressed_reports_encoding(client: TestClient) -> None:
    response = client.post("/decode", json={"payload": "!/5L!!<*e7>7P["})
    assert response.status_code == 200
    assert response.json()["position"]["compressed"] == "/5L!!<*e8> sT"


def test_decode_failure_returns_fault(client: TestClient) -> None:
    response = client.post("/decode", json={"payload": "!4903.50X/07201.75W-"})
    assert response.status_code == 422
    assert response.json() == {"ok": False, "fault": "Bad latitude sign character"}


def test_decode_rejects_wide_characters(client: TestClient) -> None:
    response = client.post("/decode", json={"payload": "!€"})
    assert response.status_code == 422
    assert response.json()["ok"] is False


def test_decode_requires_payload(client: TestClient) -> None:
    response = client.post("/decode", json={"destination": "490S5P"})
    assert response.status_code == 422


def test_distance(client: TestClient) -> None:
    response = client.get(
        "/distance", params={"lat1": 0, "lon1": 0, "lat2": 0, "lon2": 1}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["miles"] == pytest.approx(69.0935, abs=1e-3)
    assert body["bearing"] == pytest.approx(90.0)


def test_decode_applies_nmea_checksum_policy(client: TestClient) -> None:
    payload = "$GPWPL,4610.586,N,00607.754,E,4"
    response = client.post("/decode", json={"payload": payload})
    assert response.status_code == 200

    response = client.post(
        "/decode", json={"payload": payload, "nmea_checksum": "required"}
    )
    assert response.status_code == 422
    assert response.json() == {"ok": False, "fault": "Missing NMEA checksum"}


def test_decode_rejects_unknown_checksum_policy(client: TestClient) -> None:
    response = client.post(
        "/decode", json={"payload": "!4903.50N/07201.75W-", "nmea_checksum": "strict"}
    )
    assert response.status_code == 422


@pytest.mark.parametrize(
    "params",
    [
        {"lat1": "nan", "lon1": 0, "lat2": 0, "lon2": 1},
        {"lat1": 0, "lon1": "inf", "lat2": 0, "lon2": 1},
        {"lat1": 500, "lon1": 0, "lat2": 0, "lon2": 1},
        {"lat1": 0, "lon1": 0, "lat2": 0, "lon2": -180.5},
    ],
)
def test_distance_rejects_invalid_coordinates(client: TestClient, params: dict) -> None:
    response = client.get("/distance", params=params)
    assert response.status_code == 422


def test_distance_accepts_range_edges(client: TestClient) -> None:
    response = client.get(
        "/distance", params={"lat1": -90, "lon1": -180, "lat2": 90, "lon2": 180}
    )
    assert response.status_code == 200
