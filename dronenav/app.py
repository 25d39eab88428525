"""Flask application exposing the geometry endpoints.

Every POST endpoint decodes its JSON body, delegates to
:class:`~dronenav.services.PositionService`, and returns the bare JSON
result. Any :class:`~dronenav.errors.ValidationError` becomes an empty 400.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

from flask import Blueprint, Flask, current_app, jsonify, request
from flask.typing import ResponseReturnValue
from werkzeug.exceptions import BadRequest

from .config import SERVICE_UID, SERVICE_URL
from .errors import MalformedRequestError, ValidationError
from .payloads import (
    parse_distance_request,
    parse_next_position_request,
    parse_region_request,
)
from .services import PositionService

API_PREFIX = "/api/v1"

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AppSettings:
    """Static values served by the informational endpoints."""

    service_url: str = SERVICE_URL
    uid: str = SERVICE_UID


api = Blueprint("api", __name__)


def _service() -> PositionService:
    return current_app.extensions["dronenav.service"]


def _settings() -> AppSettings:
    return current_app.extensions["dronenav.settings"]


def _json_body() -> Any:
    try:
        return request.get_json(force=True)
    except BadRequest as exc:
        raise MalformedRequestError(exc.description or "unreadable JSON") from exc


@api.get("/")
def index() -> ResponseReturnValue:
    url = _settings().service_url
    return (
        "<html><body>"
        "<h1>Welcome from ILP</h1>"
        f'<h4>ILP-REST-Service-URL:</h4> <a href="{url}" target="_blank"> {url} </a>'
        "</body></html>"
    )


@api.get("/uid")
def uid() -> ResponseReturnValue:
    return _settings().uid


@api.post("/distanceTo")
def distance_to() -> ResponseReturnValue:
    return jsonify(_service().distance(parse_distance_request(_json_body())))


@api.post("/isCloseTo")
def is_close_to() -> ResponseReturnValue:
    return jsonify(_service().is_close(parse_distance_request(_json_body())))


@api.post("/nextPosition")
def next_position() -> ResponseReturnValue:
    result = _service().next_position(parse_next_position_request(_json_body()))
    return jsonify(result.to_dict())


@api.post("/isInRegion")
def is_in_region() -> ResponseReturnValue:
    return jsonify(_service().in_region(parse_region_request(_json_body())))


def _reject(exc: ValidationError) -> ResponseReturnValue:
    if isinstance(exc, MalformedRequestError):
        logger.warning("Malformed JSON in %s request: %s", request.path, exc)
    else:
        logger.warning("Rejected %s request: %s", request.path, exc)
    return "", 400


def create_app(
    service: PositionService | None = None, settings: AppSettings | None = None
) -> Flask:
    """Build the Flask app with an injected service and static settings."""

    app = Flask(__name__)
    app.extensions["dronenav.service"] = service or PositionService()
    app.extensions["dronenav.settings"] = settings or AppSettings()
    app.register_blueprint(api, url_prefix=API_PREFIX)
    app.register_error_handler(ValidationError, _reject)
    return app
