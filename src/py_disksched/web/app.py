"""Flask application factory for the py-disksched web API.

The ``create_app`` function builds a Flask app bound to one disk
geometry, with two endpoints:

- ``GET /api/policies`` — policy names in reporting order, plus the
  number of cylinders.
- ``POST /api/schedule`` — body ``{"requests": [...], "head": 53,
  "direction": "LEFT"}``; returns every policy's sequence and movement.
"""

from __future__ import annotations

from typing import Any

from flask import Flask, Response, jsonify, request

from py_disksched.config import DiskConfig
from py_disksched.disk import Direction, DiskError, DiskScheduler, default_policies
from py_disksched.report import run_to_dict

_HTTP_BAD_REQUEST = 400


class _BadRequestError(Exception):
    """Raise when the posted JSON cannot be turned into a run."""


def _parse_schedule_body(data: Any, config: DiskConfig) -> tuple[list[int], int, Direction]:
    if not isinstance(data, dict):
        msg = "Expected a JSON object"
        raise _BadRequestError(msg)
    missing = [key for key in ("requests", "head", "direction") if key not in data]
    if missing:
        msg = f"Missing field(s): {', '.join(missing)}"
        raise _BadRequestError(msg)

    requests = data["requests"]
    if not isinstance(requests, list) or not all(
        isinstance(r, int) and not isinstance(r, bool) for r in requests
    ):
        msg = "'requests' must be a list of integers"
        raise _BadRequestError(msg)

    head = data["head"]
    if not isinstance(head, int) or isinstance(head, bool):
        msg = "'head' must be an integer"
        raise _BadRequestError(msg)

    try:
        direction = Direction(data["direction"])
    except ValueError:
        msg = "Direction must be LEFT or RIGHT."
        raise _BadRequestError(msg) from None

    if not 0 <= head <= config.max_cylinder:
        msg = f"Initial head must be between 0 and {config.max_cylinder}."
        raise _BadRequestError(msg)
    return requests, head, direction


def create_app(config: DiskConfig | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config: Disk geometry to schedule against (defaults to 300 cylinders).

    Returns:
        A configured Flask application ready to serve.

    """
    disk = config if config is not None else DiskConfig()
    app = Flask(__name__)

    @app.route("/api/policies")
    def policies() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return policy names and disk size."""
        names = [policy.name for policy in default_policies(max_cylinder=disk.max_cylinder)]
        return jsonify({"policies": names, "cylinders": disk.cylinders})

    @app.route("/api/schedule", methods=["POST"])
    def schedule() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Run all six policies over the posted request batch.

        Returns:
            JSON with ``head``, ``direction`` and ``results`` fields, or
            ``error`` with status 400.

        """
        try:
            requests, head, direction = _parse_schedule_body(
                request.get_json(silent=True), disk
            )
            scheduler = DiskScheduler(requests, max_cylinder=disk.max_cylinder)
        except (_BadRequestError, DiskError) as exc:
            return jsonify({"error": str(exc)}), _HTTP_BAD_REQUEST

        runs = scheduler.run_all(head=head, direction=direction)
        return jsonify(
            {
                "head": head,
                "direction": str(direction),
                "results": [run_to_dict(run) for run in runs],
            }
        )

    return app


def main() -> None:
    """Run the web API development server.

    This is the ``py-disksched-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
