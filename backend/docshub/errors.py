from flask import jsonify
from werkzeug.exceptions import HTTPException
from docshub.domain.invariants.exceptions import DomainError, VersionConflict

def register_error_handlers(app):
    @app.errorhandler(DomainError)
    def handle_domain_error(error):
        body = {
            "error": type(error).__name__,
            "message": error.message
        }
        if isinstance(error, VersionConflict) and error.current_version is not None:
            body["current_version"] = error.current_version

        response = jsonify(body)
        response.status_code = error.status_code
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        response = jsonify({
            "error": error.name.replace(" ", ""),
            "message": error.description
        })
        response.status_code = error.code
        return response
