from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.auth import admin_required, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings/overtime-threshold", methods=["GET"], endpoint="overtime_threshold_get")
    @login_required
    def overtime_threshold_get():
        return jsonify({"success": True, "threshold": container.settings_service.get_threshold()})

    @app.route("/api/settings/overtime-threshold", methods=["PUT", "POST"], endpoint="overtime_threshold_set")
    @admin_required
    def overtime_threshold_set():
        data = request.get_json(silent=True) or {}
        hours = container.settings_service.set_threshold(data.get("threshold"))
        return jsonify({"success": True, "threshold": hours})
