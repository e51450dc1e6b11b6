"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any
from urllib.parse import urlencode

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

from growth_projection.core.normalize import default_configuration, normalize
from growth_projection.core.report import project
from growth_projection.presentation.csv_export import build_csv
from growth_projection.presentation.query import encode_query, parse_query
from growth_projection.schemas.export import ExportParams
from growth_projection.schemas.health import HealthResponse
from growth_projection.schemas.share import ShareResponse

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    current_app.logger.info("rejected request parameters: %s", exc.errors())
    return jsonify({"detail": exc.errors()}), HTTPStatus.UNPROCESSABLE_ENTITY


def _json_response(model: BaseModel) -> Response:
    # non-finite floats serialize as null
    return Response(model.model_dump_json(), mimetype="application/json")


def _report_response(raw: Any) -> Response:
    report = project(raw)
    if report.warnings:
        current_app.logger.info("projection warnings: %s", "; ".join(report.warnings))
    return _json_response(report)


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = HealthResponse(status="ok")
    return jsonify(response.model_dump())


@api_bp.get("/defaults")
def defaults() -> Any:
    """The configuration used when no inputs are given."""
    return _json_response(default_configuration())


@api_bp.post("/projection")
def projection() -> Any:
    """Project a JSON body of raw inputs; missing or bad fields take defaults."""
    payload = request.get_json(force=True, silent=False)
    return _report_response(payload)


@api_bp.get("/projection")
def projection_from_query() -> Any:
    """Project the inputs carried in a shared link's query string."""
    return _report_response(parse_query(request.args))


@api_bp.get("/projection.csv")
def projection_csv() -> Response:
    """Download the projection table in the requested view (real or nominal)."""
    params = ExportParams.model_validate(request.args.to_dict())
    report = project(parse_query(request.args))
    filename = current_app.config["CSV_FILENAME"]
    return Response(
        build_csv(report, params.view),
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@api_bp.post("/share")
def share() -> Any:
    """Normalize a JSON body and return the query string that reproduces it."""
    payload = request.get_json(force=True, silent=False)
    config = normalize(payload)
    return _json_response(ShareResponse(inputs=config, query=urlencode(encode_query(config))))
