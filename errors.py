"""App-wide error handlers for the JSON API.

- pydantic ValidationError -> 400 with field-level details
- UsernameTakenError       -> 400
- unauthenticated          -> 401, empty body (see login_manager handler in app.py)
- not found / not owned    -> 404 via abort()
"""

import logging

from flask import Flask, jsonify, request
from pydantic import ValidationError

from storage import UsernameTakenError

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def validation_error(exc: ValidationError):
        details = [
            {"field": ".".join(str(p) for p in e["loc"]), "message": e["msg"]}
            for e in exc.errors()
        ]
        logger.warning("Validation error on %s: %s", request.path, details)
        return jsonify(message="Invalid request data", errors=details), 400

    @app.errorhandler(UsernameTakenError)
    def username_taken(exc: UsernameTakenError):
        logger.warning("Registration refused, username taken: %s", exc.username)
        return jsonify(message="Username already exists"), 400

    @app.errorhandler(404)
    def not_found(exc):
        return jsonify(message="Not found"), 404
