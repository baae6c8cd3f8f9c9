from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/generate-report", methods=["POST"], endpoint="api_generate_report")
    @app.route("/generate-report", methods=["POST"], endpoint="generate_report")
    def generate_report():
        body, status = container.delivery_service.handle(request.get_json(silent=True))
        return jsonify(body), status
