from flask import jsonify
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import Conflict, HTTPException

from models import db


def error_response(error):
    body = {
        "statusCode": error.code,
        "error": error.name,
        "message": error.description,
    }
    errors = getattr(error, 'errors', None)
    if errors is not None:
        body["errors"] = errors
    return jsonify(body), error.code


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return error_response(error)

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(error):
        db.session.rollback()
        app.logger.warning("Integrity error: %s", error.orig)
        return error_response(Conflict("Record conflicts with an existing entry"))
