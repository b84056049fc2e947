from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ConfigurationError, ValidationError
from .model import DateRange

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def token_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            expected = app.config.get("IMPORT_API_TOKEN")
            if expected and request.headers.get("X-Api-Token") != expected:
                return jsonify({"success": False, "message": "Invalid or missing API token"}), 401
            return view(*args, **kwargs)

        return wrapper

    @app.route("/integrations/primeponto/import", methods=["POST"], endpoint="primeponto_import")
    @token_required
    def primeponto_import():
        """Import worked hours from Primeponto for a day or a period."""
        data = request.get_json(silent=True) or request.form
        start_s = (data.get("start") or "").strip()
        end_s = (data.get("end") or "").strip() or None

        if not start_s:
            return jsonify({"success": False, "message": "Missing start date"}), 400

        try:
            date_range = DateRange.parse(start_s, end_s)
            report = container.import_time_clock(date_range)
        except (ValidationError, ConfigurationError) as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Primeponto import failed")
            return jsonify({"success": False, "message": "Unexpected error while importing time clock"}), 500

        return jsonify({"success": bool(report), "report": report.to_dict()}), 200
