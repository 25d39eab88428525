"""Global pytest fixtures & helpers.

Adds project root to path and provides reusable geometry fixtures and a
Flask test client so individual test modules stay small.
"""
from __future__ import annotations

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from dronenav.app import AppSettings, create_app
from dronenav.models import Position, Region, RegionRequest


# --- Factory helpers -------------------------------------------------
def make_vertices(*coords):
    return tuple(Position(lng, lat) for lng, lat in coords)


def make_region_request(point, coords, name="Test Region"):
    return RegionRequest(
        position=Position(*point),
        region=Region(name=name, vertices=make_vertices(*coords)),
    )


SQUARE = ((0, 0), (0, 10), (10, 10), (10, 0), (0, 0))


def position_json(lng, lat):
    return {"lng": lng, "lat": lat}


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def square_vertices():
    return make_vertices(*SQUARE)


@pytest.fixture
def app():
    return create_app(settings=AppSettings(service_url="https://ilp.example.test/", uid="s0000000"))


@pytest.fixture
def client(app):
    return app.test_client()
