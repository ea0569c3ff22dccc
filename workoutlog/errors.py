from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException


class ApiError(Exception):
    """Base class for errors reported to the caller as JSON"""
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """Missing or malformed request input"""
    status_code = 400


class NotFoundError(ApiError):
    """No workout log matches the requested id"""
    status_code = 404

    def __init__(self, message='not found'):
        super().__init__(message)


class StoreError(ApiError):
    """The database rejected or failed a statement"""
    status_code = 500

    @classmethod
    def from_exception(cls, exc):
        # Pass the driver's own message through, not SQLAlchemy's wrapper text
        orig = getattr(exc, 'orig', None)
        return cls(str(orig) if orig is not None else str(exc))


def _error_response(app, message, status_code):
    if status_code >= 500:
        app.logger.error(f"Request failed ({status_code}): {message}")
    else:
        app.logger.warning(f"Request rejected ({status_code}): {message}")
    return jsonify({'error': message}), status_code


def register_error_handlers(app, db):
    @app.errorhandler(ApiError)
    def handle_api_error(e):
        return _error_response(app, e.message, e.status_code)

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(e):
        db.session.rollback()
        error = StoreError.from_exception(e)
        return _error_response(app, error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return _error_response(app, e.description, e.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        app.logger.exception("Unhandled error")
        return jsonify({'error': str(e)}), 500
