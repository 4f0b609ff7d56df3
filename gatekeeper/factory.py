"""Application factory for the authorize endpoint app."""

from flask import Flask, Response, g, jsonify
from werkzeug.exceptions import HTTPException, Forbidden, Unauthorized, \
    BadRequest, MethodNotAllowed, InternalServerError, NotFound

from . import endpoint, filters
from .app_logging import setup_logger
from .routes import blueprint

JSON_ERRORS = (Forbidden, Unauthorized, BadRequest, InternalServerError,
               NotFound, MethodNotAllowed)

SERVER_ERROR_REASON = 'The authorize request could not be processed'


def create_web_app() -> Flask:
    """Initialize and configure the authorize endpoint application."""
    app = Flask('gatekeeper')
    app.config.from_pyfile('config.py')

    setup_logger(app.config['LOGLEVEL'], app.config['LOGFILE'],
                 app.config['LOGJSON'])
    endpoint.init_app(app)
    app.register_blueprint(blueprint)

    app.jinja_env.filters['scope_label'] = filters.scope_label

    register_error_handlers(app)
    return app


def register_error_handlers(app: Flask) -> None:
    """Render the HTTP errors in :const:`JSON_ERRORS` as JSON."""
    for error in JSON_ERRORS:
        app.errorhandler(error)(jsonify_exception)


def jsonify_exception(error: HTTPException) -> Response:
    """
    Render an exception as JSON, with the request's correlation ID.

    Unhandled faults (e.g. in the request validator) arrive here as an
    :class:`InternalServerError`; their details stay in the log.
    """
    status_code = error.code or InternalServerError.code
    reason = error.description
    if status_code == InternalServerError.code:
        reason = SERVER_ERROR_REASON
    response: Response = jsonify(reason=reason,
                                 request_id=g.get('request_id'))
    response.status_code = status_code
    return response
