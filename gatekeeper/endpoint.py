"""
The authorize endpoint.

:class:`AuthorizeEndpoint` is the gate in front of code and token issuance.
It enforces the transport preconditions, runs the request validator, and for
a failed request builds the error page and records exactly one audit event.
Valid requests are handed to a downstream handler, whose result is returned
unchanged.
"""

import logging
from typing import Any, Callable, Iterable, Mapping

from flask import Flask
from werkzeug.wrappers import Request

from .domain import ValidatedAuthorizeRequest, RequestContext
from .events import EndpointName
from .results import StatusCodeResult, ErrorPageResult, \
    validated_request_result
from .services.clients import ClientStore
from .services.events import EventSink, create_sink
from .services.localization import Localization, MessageCatalog
from .services.validator import RequestValidator
from . import audit, projection

logger = logging.getLogger(__name__)

SANCTIONED_METHODS = ('GET', 'POST')
"""The read form (query string) and the submit form (form-encoded body)."""

FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'

Downstream = Callable[[ValidatedAuthorizeRequest, RequestContext], Any]


class AuthorizeEndpoint(object):
    """Decides the outcome of authorize requests."""

    def __init__(self, validator: RequestValidator,
                 localization: Localization, sink: EventSink,
                 downstream: Downstream = validated_request_result,
                 allowed_methods: Iterable[str] = SANCTIONED_METHODS,
                 error_page_status: int = 400) -> None:
        """
        Wire up the collaborators of the endpoint.

        Parameters
        ----------
        validator : :class:`.RequestValidator`
            Anything with a compatible ``validate`` method.
        localization : :class:`.Localization`
        sink : :class:`.EventSink`
            Receives audit events for failed requests.
        downstream : callable
            Called with the validated request and the request context when
            validation succeeds.
        allowed_methods : iterable
            A subset of :const:`SANCTIONED_METHODS`.
        error_page_status : int
            Status code of the error page.

        """
        methods = tuple(method.upper() for method in allowed_methods)
        unsanctioned = set(methods) - set(SANCTIONED_METHODS)
        if unsanctioned:
            raise ValueError(f'Methods not allowed: {sorted(unsanctioned)}')
        self.validator = validator
        self.localization = localization
        self.sink = sink
        self.downstream = downstream
        self.allowed_methods = methods
        self.error_page_status = error_page_status

    def process(self, request: Request, context: RequestContext) -> Any:
        """
        Handle an inbound authorize request.

        Parameters
        ----------
        request : :class:`werkzeug.wrappers.Request`
        context : :class:`.RequestContext`

        Returns
        -------
        object
            A :class:`.StatusCodeResult` with status 405 if the method is not
            accepted, otherwise the result of :meth:`process_request`.

        """
        method = request.method.upper()
        if method not in self.allowed_methods:
            logger.debug('Method %s not allowed', method)
            return StatusCodeResult(405, self.allowed_methods)
        if method == 'POST':
            if request.mimetype != FORM_CONTENT_TYPE:
                logger.debug('Unsupported POST body %s', request.mimetype)
                return StatusCodeResult(405, self.allowed_methods)
            parameters = request.form
        else:
            parameters = request.args
        return self.process_request(parameters, context)

    def process_request(self, parameters: Mapping[str, str],
                        context: RequestContext) -> Any:
        """
        Validate the request parameters, and decide the response.

        A validator that raises is a fatal fault, and propagates. Protocol
        errors come back as data, and produce an :class:`.ErrorPageResult`.
        """
        logger.debug('Processing authorize request %s', context.request_id)
        outcome = self.validator.validate(parameters, context.user)
        if not outcome.is_error:
            logger.debug('Authorize request %s is valid', context.request_id)
            return self.downstream(outcome.validated_request, context)

        logger.info('Authorize request %s failed: %s (%s error)',
                    context.request_id, outcome.error_code,
                    outcome.error_kind)
        try:
            model = projection.project(outcome, context.request_id,
                                       self.localization)
        finally:
            audit.emit(outcome, EndpointName.AUTHORIZE, self.sink, context)
        return ErrorPageResult(model, self.error_page_status)


def create_endpoint(app: Flask,
                    downstream: Downstream = validated_request_result) \
        -> AuthorizeEndpoint:
    """
    Instantiate an :class:`AuthorizeEndpoint` from the app config.

    Messages are resolved in ``DEFAULT_LOCALE``, falling back to English.
    ``downstream`` handles valid requests; by default they get a summary page.
    """
    validator = RequestValidator(ClientStore.from_config(app))
    localization = MessageCatalog(app.config['DEFAULT_LOCALE'])
    methods = [method.strip() for method
               in app.config['AUTHORIZE_ALLOWED_METHODS'].split(',')
               if method.strip()]
    return AuthorizeEndpoint(validator, localization, create_sink(app),
                             downstream=downstream,
                             allowed_methods=methods,
                             error_page_status=int(
                                 app.config['ERROR_PAGE_STATUS']
                             ))


def init_app(app: Flask,
             downstream: Downstream = validated_request_result) -> None:
    """Attach an :class:`AuthorizeEndpoint` to a :class:`Flask` app."""
    endpoint = create_endpoint(app, downstream)
    app.authorize_endpoint = endpoint
    logger.debug('Created endpoint %s', id(endpoint))
