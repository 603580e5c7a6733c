# created: 10/19/2026
# last updated: 10/19/2026
# flask app for the material search api

import logging
from typing import Optional

from flask import Flask, current_app, jsonify, request
from flask_cors import CORS

from material_proxy.config import Settings, load_settings
from material_proxy.errors import ErrorKind
from material_proxy.handler import handle

# common verbs reach the view; anything else is answered by the 405 handler
ROUTE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or load_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.config["SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": list(settings.cors_origins)}},
        supports_credentials=False,
    )

    @app.route("/api/generate", methods=ROUTE_METHODS)
    def generate():
        body = request.get_json(force=True, silent=True)
        result = handle(request.method, body, current_app.config["SETTINGS"])
        return jsonify(result.body), result.status

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return jsonify({"error": ErrorKind.INVALID_METHOD.message}), 405

    return app
