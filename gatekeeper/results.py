"""
Results produced by the authorize endpoint.

The endpoint returns either a :class:`StatusCodeResult` (transport-level
rejection), an :class:`ErrorPageResult`, or whatever the downstream handler
returns for a valid request. Results are turned into Flask responses by
:meth:`EndpointResult.execute`, which requires an application context.
"""

from http import HTTPStatus
from typing import Iterable

from flask import Response, jsonify, render_template, make_response

from .domain import ErrorResponseModel, ValidatedAuthorizeRequest, \
    RequestContext


class EndpointResult(object):
    """Base class for endpoint results."""

    def execute(self) -> Response:
        """Render the result as a response."""
        raise NotImplementedError('Implement in a subclass')


class StatusCodeResult(EndpointResult):
    """A bare status code, e.g. 405 for an unsupported method."""

    def __init__(self, status_code: int,
                 allowed_methods: Iterable[str] = ()) -> None:
        """Set the status code, and the methods to list in ``Allow``."""
        self.status_code = status_code
        self.allowed_methods = tuple(allowed_methods)

    def execute(self) -> Response:
        """Render the status as a JSON response."""
        response: Response = jsonify(
            reason=HTTPStatus(self.status_code).phrase
        )
        response.status_code = self.status_code
        if self.allowed_methods:
            response.headers['Allow'] = ', '.join(self.allowed_methods)
        return response


class ErrorPageResult(EndpointResult):
    """The authorize error page."""

    def __init__(self, model: ErrorResponseModel,
                 status_code: int = HTTPStatus.BAD_REQUEST) -> None:
        """Set the view model for the page."""
        self.model = model
        self.status_code = status_code

    def execute(self) -> Response:
        """Render the error page."""
        content = render_template('gatekeeper/error.html', model=self.model)
        return make_response(content, self.status_code)


class ValidatedRequestResult(EndpointResult):
    """
    Hand-off page for a valid request.

    This is the default downstream handler; applications that issue codes or
    tokens replace it (see :func:`gatekeeper.endpoint.init_app`).
    """

    def __init__(self, request: ValidatedAuthorizeRequest,
                 context: RequestContext) -> None:
        self.request = request
        self.context = context

    def execute(self) -> Response:
        """Render a summary of the validated request."""
        content = render_template('gatekeeper/authorize.html',
                                  authorize_request=self.request,
                                  user=self.context.user)
        return make_response(content, HTTPStatus.OK)


def validated_request_result(request: ValidatedAuthorizeRequest,
                             context: RequestContext) \
        -> ValidatedRequestResult:
    """Default downstream handler for valid requests."""
    return ValidatedRequestResult(request, context)
