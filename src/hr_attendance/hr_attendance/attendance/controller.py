from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import StoreError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance_list")
    def api_attendance_list():
        try:
            punches = container.attendance_service.list_punches()
        except StoreError:
            return jsonify({"error": "Failed to fetch attendance data"}), 500
        return jsonify(punches)

    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance_import")
    def api_attendance_import():
        """Import punches from a JSON array or an uploaded CSV/XLSX file."""
        try:
            upload = request.files.get("file")
            if upload is not None:
                count = container.attendance_service.import_file(upload.stream, upload.filename or "")
            else:
                count = container.attendance_service.import_payload(request.get_json(silent=True))
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except StoreError:
            return jsonify({"error": "Failed to import attendance data"}), 500

        return jsonify({"success": True, "count": count})
