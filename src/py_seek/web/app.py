"""Flask application factory for the py-seek JSON API.

The ``create_app`` function returns a Flask app with four endpoints:

- ``GET /api/algorithms`` — names, descriptions, pros and cons.
- ``POST /api/schedule`` — run one policy and return its schedule.
- ``POST /api/compare`` — run every policy and report the best.
- ``POST /api/random`` — generate a random request workload.

Request bodies use the camelCase keys a browser front end sends
(``initialHead``, ``maxCylinder``).  Everything is validated through
``DiskGeometry`` before it reaches the engine; bad input gets a 400.
"""

from __future__ import annotations

import random
from typing import Any

from flask import Flask, Response, jsonify, request

from py_seek.dispatch import ALGORITHM_INFO, Algorithm, best_algorithm, get_all_results, run_algorithm
from py_seek.geometry import (
    DEFAULT_HEAD,
    DEFAULT_MAX_CYLINDER,
    DiskGeometry,
    InvalidGeometryError,
    InvalidRequestError,
    is_integer,
    random_requests,
)
from py_seek.logging import Logger, LogLevel

_HTTP_BAD_REQUEST = 400


def _parse_workload(data: dict[str, Any]) -> tuple[list[int], int, int]:
    """Validate a schedule/compare body into (requests, head, max_cylinder).

    Raises:
        InvalidGeometryError: If the disk size or head is unusable.
        InvalidRequestError: If the request list is missing or invalid.

    """
    geometry = DiskGeometry(max_cylinder=data.get("maxCylinder", DEFAULT_MAX_CYLINDER))
    head = geometry.validate_head(data.get("initialHead", DEFAULT_HEAD))
    raw_requests = data.get("requests")
    if not isinstance(raw_requests, list):
        msg = "Missing 'requests' list"
        raise InvalidRequestError(msg)
    return geometry.validate_requests(raw_requests), head, geometry.max_cylinder


def create_app(*, logger: Logger | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        logger: Audit log for schedules and rejected requests; a fresh
            one is created if omitted and exposed as
            ``app.config["SEEK_LOGGER"]``.

    Returns:
        A configured Flask application ready to serve.

    """
    log = logger if logger is not None else Logger()

    app = Flask(__name__)
    app.config["SEEK_LOGGER"] = log

    def bad_request(error: ValueError) -> tuple[Response, int]:
        log.log(LogLevel.WARNING, f"rejected request: {error}", source="web")
        return jsonify({"error": str(error)}), _HTTP_BAD_REQUEST

    @app.route("/api/algorithms")
    def algorithms() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the info panel text for each policy."""
        return jsonify(
            {
                str(algorithm): {
                    "name": info.name,
                    "description": info.description,
                    "pros": list(info.pros),
                    "cons": list(info.cons),
                }
                for algorithm, info in ALGORITHM_INFO.items()
            }
        )

    @app.route("/api/schedule", methods=["POST"])
    def schedule() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Run one policy.

        Expects JSON body: ``{"algorithm", "requests", "initialHead", "maxCylinder"}``

        Returns:
            The schedule as JSON, plus the ``algorithm`` actually run.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), _HTTP_BAD_REQUEST
        try:
            requests, head, max_cylinder = _parse_workload(data)
        except ValueError as error:
            return bad_request(error)

        name = data.get("algorithm", Algorithm.FCFS)
        result = run_algorithm(str(name), requests, head, max_cylinder, logger=log)
        return jsonify({"algorithm": str(Algorithm.parse(str(name))), **result.to_dict()})

    @app.route("/api/compare", methods=["POST"])
    def compare() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Run all four policies on the same workload.

        Returns:
            JSON with a ``results`` mapping and the ``best`` policy.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), _HTTP_BAD_REQUEST
        try:
            requests, head, max_cylinder = _parse_workload(data)
        except ValueError as error:
            return bad_request(error)

        results = get_all_results(requests, head, max_cylinder)
        best = best_algorithm(results)
        log.log(
            LogLevel.INFO,
            f"compared {len(results)} algorithms on {len(requests)} requests, best {best}",
            source="web",
        )
        return jsonify(
            {
                "results": {str(algorithm): result.to_dict() for algorithm, result in results.items()},
                "best": str(best),
                "lowestSeekTime": results[best].total_seek_time,
            }
        )

    @app.route("/api/random", methods=["POST"])
    def random_workload() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Generate a random set of distinct requests.

        Expects JSON body: ``{"maxCylinder", "initialHead", "seed"}``
        (all optional).  An out-of-range head is clamped onto the disk.

        """
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), _HTTP_BAD_REQUEST
        try:
            geometry = DiskGeometry(max_cylinder=data.get("maxCylinder", DEFAULT_MAX_CYLINDER))
        except InvalidGeometryError as error:
            return bad_request(error)

        head = data.get("initialHead", DEFAULT_HEAD)
        if not is_integer(head):
            return jsonify({"error": "'initialHead' must be an integer"}), _HTTP_BAD_REQUEST
        head = geometry.clamp_head(head)

        seed = data.get("seed")
        if seed is not None and not (is_integer(seed) or isinstance(seed, str)):
            return jsonify({"error": "'seed' must be an integer or string"}), _HTTP_BAD_REQUEST
        rng = random.Random(seed) if seed is not None else None  # noqa: S311
        requests = random_requests(geometry, head=head, rng=rng)
        return jsonify({"requests": requests, "initialHead": head, "maxCylinder": geometry.max_cylinder})

    return app


def main() -> None:
    """Run the API development server.

    This is the ``py-seek-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
