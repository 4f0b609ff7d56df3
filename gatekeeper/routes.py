"""Provides Flask integration for the authorize endpoint."""

import logging
import uuid

from flask import Blueprint, Response, current_app, g, request, \
    make_response

from .domain import RequestContext
from .results import EndpointResult
from .services import users

logger = logging.getLogger(__name__)

blueprint = Blueprint('gatekeeper', __name__, url_prefix='')

ROUTED_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']
"""
The endpoint itself decides which of these are acceptable.

Flask's automatic OPTIONS response is disabled on the route, so OPTIONS also
reaches the endpoint.
"""


@blueprint.before_app_request
def assign_request_id() -> None:
    """Bind a correlation ID to the request, once."""
    header = current_app.config['REQUEST_ID_HEADER']
    g.request_id = request.headers.get(header) or uuid.uuid4().hex


@blueprint.after_app_request
def apply_response_headers(response: Response) -> Response:
    """Echo the correlation ID, and prevent UI redress attacks."""
    request_id = g.get('request_id')
    if request_id:
        response.headers[current_app.config['REQUEST_ID_HEADER']] = request_id
    response.headers['Content-Security-Policy'] = "frame-ancestors 'none'"
    response.headers['X-Frame-Options'] = 'DENY'
    return response


def get_context() -> RequestContext:
    """Collect the request-scoped values for the endpoint."""
    cookie_name = current_app.config['AUTH_SESSION_COOKIE_NAME']
    user = users.load_user(request.cookies.get(cookie_name),
                           current_app.config['JWT_SECRET'])
    return RequestContext(request_id=g.request_id, user=user,
                          remote_addr=request.remote_addr)


@blueprint.route('/authorize', methods=ROUTED_METHODS,
                 provide_automatic_options=False)
def authorize() -> Response:
    """User-facing entry point for the authorize endpoint."""
    endpoint = current_app.authorize_endpoint
    result = endpoint.process(request, get_context())
    if isinstance(result, EndpointResult):
        return result.execute()
    return make_response(result)
