"""
Default request validator for the authorize endpoint.

Protocol errors are returned as a :class:`.ValidationOutcome`, never raised.
Whatever parts of the request were resolved before the failure are kept on
the outcome, so that the error can be echoed back to the client. The
redirect URI is only kept once it is known to be registered for the client.
"""

import logging
from typing import Mapping, Optional

from authlib.oauth2.rfc6749.errors import InvalidRequestError, \
    UnauthorizedClientError, UnsupportedResponseTypeError, InvalidScopeError
from authlib.oauth2.rfc6749.util import scope_to_list
from authlib.oidc.core.errors import LoginRequiredError

from ..domain import ValidationOutcome, ValidatedAuthorizeRequest, \
    ErrorKind, ResponseMode, UserContext
from .clients import ClientStore

logger = logging.getLogger(__name__)


def default_response_mode(response_type: str) -> str:
    """Get the response mode implied by a response type."""
    if {'token', 'id_token'} & set(response_type.split()):
        return ResponseMode.FRAGMENT
    return ResponseMode.QUERY


class RequestValidator(object):
    """Validates authorize requests against registered clients."""

    def __init__(self, clients: ClientStore) -> None:
        """Set the client registrations to validate against."""
        self.clients = clients

    def validate(self, parameters: Mapping[str, str],
                 user: Optional[UserContext]) -> ValidationOutcome:
        """
        Validate an authorize request.

        Parameters
        ----------
        parameters : Mapping
            Name/value parameters from the query string or form body.
        user : :class:`.UserContext` or None
            The signed-in user, if any.

        Returns
        -------
        :class:`.ValidationOutcome`

        """
        client_id = parameters.get('client_id', '')
        if not client_id:
            logger.debug('Request has no client_id')
            return ValidationOutcome.failure(InvalidRequestError.error,
                                             ErrorKind.CLIENT,
                                             description='Missing client_id')

        client = self.clients.get(client_id)
        request = ValidatedAuthorizeRequest(client_id=client_id)
        if client is None:
            logger.debug('No such client %s', client_id)
            return ValidationOutcome.failure(UnauthorizedClientError.error,
                                             ErrorKind.CLIENT, request)
        request = request._replace(client_name=client.name)

        redirect_uri = parameters.get('redirect_uri') \
            or client.default_redirect_uri
        if not redirect_uri or not client.check_redirect_uri(redirect_uri):
            logger.debug('Redirect URI %s not registered for %s',
                         redirect_uri, client_id)
            return ValidationOutcome.failure(
                InvalidRequestError.error, ErrorKind.CLIENT, request,
                description='Invalid redirect_uri'
            )

        response_type = parameters.get('response_type', '')
        implied_mode = default_response_mode(response_type)
        response_mode = parameters.get('response_mode') or implied_mode
        request = request._replace(
            redirect_uri=redirect_uri,
            state=parameters.get('state', ''),
            response_type=response_type,
            response_mode=implied_mode
        )
        if response_mode not in ResponseMode.MODES:
            logger.debug('Unsupported response mode %s', response_mode)
            return ValidationOutcome.failure(
                InvalidRequestError.error, ErrorKind.CLIENT, request,
                description='Unsupported response_mode'
            )
        request = request._replace(response_mode=response_mode)

        if not response_type:
            return ValidationOutcome.failure(
                InvalidRequestError.error, ErrorKind.CLIENT, request,
                description='Missing response_type'
            )
        if not client.check_response_type(response_type):
            logger.debug('Client %s may not use response type %s',
                         client_id, response_type)
            return ValidationOutcome.failure(
                UnsupportedResponseTypeError.error, ErrorKind.CLIENT, request
            )

        scopes = tuple(scope_to_list(parameters.get('scope')) or ())
        request = request._replace(scopes=scopes)
        if not client.check_requested_scopes(scopes):
            logger.debug('Client %s may not request %s', client_id, scopes)
            return ValidationOutcome.failure(InvalidScopeError.error,
                                             ErrorKind.CLIENT, request)

        if user is None:
            logger.debug('No user is signed in')
            return ValidationOutcome.failure(LoginRequiredError.error,
                                             ErrorKind.USER, request)
        return ValidationOutcome.success(request)
