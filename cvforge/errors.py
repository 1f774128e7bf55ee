"""Service-level errors and the Flask handlers that render them."""
import logging

import pydantic
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    status_code = 500
    kind = "InternalError"

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self):
        payload = {"status": "error", "error": self.kind, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class NotFound(ServiceError):
    """Entity absent, or owned by another user. The two are never told apart."""
    status_code = 404
    kind = "NotFound"


class ValidationError(ServiceError):
    status_code = 400
    kind = "ValidationError"

    @classmethod
    def from_pydantic(cls, exc: pydantic.ValidationError, message="Invalid input data"):
        details = [
            {
                "field": ".".join(str(part) for part in err["loc"]) or None,
                "message": err["msg"],
            }
            for err in exc.errors()
        ]
        return cls(message, details=details)


class Conflict(ServiceError):
    status_code = 409
    kind = "Conflict"


def register_error_handlers(app):
    @app.errorhandler(ServiceError)
    def handle_service_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(pydantic.ValidationError)
    def handle_pydantic_error(error):
        wrapped = ValidationError.from_pydantic(error)
        return jsonify(wrapped.to_dict()), wrapped.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({
            "status": "error",
            "error": error.name.replace(" ", ""),
            "message": error.description,
        }), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception(f"❌ Unhandled error: {error}")
        return jsonify({
            "status": "error",
            "error": "InternalError",
            "message": "Internal server error",
        }), 500
