"""HTTP layer tests using the Flask test client."""

import logging

import pytest

from dronenav.app import create_app
from dronenav.services import PositionServiceConfig, PositionService

from conftest import SQUARE, position_json


def _region_body(point, coords, name="square"):
    return {
        "position": position_json(*point),
        "region": {"name": name, "vertices": [position_json(*c) for c in coords]},
    }


def test_index_links_service_url(client):
    resp = client.get("/api/v1/")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "Welcome from ILP" in html
    assert 'href="https://ilp.example.test/"' in html


def test_uid(client):
    resp = client.get("/api/v1/uid")
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "s0000000"


def test_distance_to(client):
    resp = client.post(
        "/api/v1/distanceTo",
        json={"position1": position_json(0, 0), "position2": position_json(3, 4)},
    )
    assert resp.status_code == 200
    assert resp.get_json() == pytest.approx(5.0)


def test_distance_to_missing_coordinate_is_rejected(client):
    resp = client.post(
        "/api/v1/distanceTo",
        json={"position1": {"lng": 0}, "position2": position_json(3, 4)},
    )
    assert resp.status_code == 400
    assert resp.data == b""


@pytest.mark.parametrize(
    "data", ["{not json", "", "null", "[1, 2]", '{"position1": "here"}']
)
def test_unreadable_bodies_are_rejected(client, data):
    resp = client.post(
        "/api/v1/distanceTo", data=data, content_type="application/json"
    )
    assert resp.status_code == 400
    assert resp.data == b""


def test_malformed_json_is_logged(client, caplog):
    with caplog.at_level(logging.WARNING, logger="dronenav.app"):
        client.post("/api/v1/isCloseTo", data="{", content_type="application/json")
    assert any("Malformed JSON" in r.getMessage() for r in caplog.records)


def test_is_close_to(client):
    resp = client.post(
        "/api/v1/isCloseTo",
        json={"position1": position_json(0, 0), "position2": position_json(0.0001, 0)},
    )
    assert resp.status_code == 200
    assert resp.get_json() is True


def test_is_close_to_far(client):
    resp = client.post(
        "/api/v1/isCloseTo",
        json={"position1": position_json(0, 0), "position2": position_json(1, 0)},
    )
    assert resp.get_json() is False


def test_next_position(client):
    resp = client.post(
        "/api/v1/nextPosition", json={"start": position_json(0, 0), "angle": 0}
    )
    assert resp.status_code == 200
    assert resp.get_json() == {"lng": pytest.approx(0.00015), "lat": 0.0}


@pytest.mark.parametrize("angle", [10, 360, -5, None])
def test_next_position_bad_angle(client, angle):
    resp = client.post(
        "/api/v1/nextPosition", json={"start": position_json(0, 0), "angle": angle}
    )
    assert resp.status_code == 400


@pytest.mark.parametrize(
    "point,expected", [((5, 5), True), ((15, 15), False), ((0, 0), True), ((5, 0), True)]
)
def test_is_in_region(client, point, expected):
    resp = client.post("/api/v1/isInRegion", json=_region_body(point, SQUARE))
    assert resp.status_code == 200
    assert resp.get_json() is expected


def test_is_in_region_rejects_unclosed_triangle(client):
    resp = client.post(
        "/api/v1/isInRegion", json=_region_body((0.2, 0.2), [(0, 0), (1, 0), (0, 1)])
    )
    assert resp.status_code == 400


def test_is_in_region_rejects_missing_region(client):
    resp = client.post("/api/v1/isInRegion", json={"position": position_json(0, 0)})
    assert resp.status_code == 400


def test_get_not_allowed_on_post_endpoints(client):
    assert client.get("/api/v1/distanceTo").status_code == 405


def test_injected_service_configuration():
    service = PositionService(PositionServiceConfig(step_size=1.0))
    client = create_app(service=service).test_client()
    resp = client.post(
        "/api/v1/nextPosition", json={"start": position_json(0, 0), "angle": 90}
    )
    assert resp.get_json()["lat"] == pytest.approx(1.0)


HUGE_INTEGER = "1" + "0" * 400


@pytest.mark.parametrize(
    "path,data",
    [
        (
            "/api/v1/distanceTo",
            '{"position1": {"lng": %s, "lat": 0}, "position2": {"lng": 0, "lat": 0}}'
            % HUGE_INTEGER,
        ),
        (
            "/api/v1/nextPosition",
            '{"start": {"lng": 0, "lat": 0}, "angle": %s}' % HUGE_INTEGER,
        ),
    ],
)
def test_integers_beyond_float_range_are_rejected(client, path, data):
    resp = client.post(path, data=data, content_type="application/json")
    assert resp.status_code == 400
    assert resp.data == b""


def test_distance_of_large_coordinates_is_valid_json(client):
    resp = client.post(
        "/api/v1/distanceTo",
        json={"position1": position_json(1e200, 0), "position2": position_json(0, 0)},
    )
    assert resp.status_code == 200
    assert resp.get_data(as_text=True).strip() == "1e+200"
