"""
Core domain classes for the authorize endpoint.

Everything here is an immutable :class:`typing.NamedTuple`. A
:class:`ValidationOutcome` is produced once per request by the request
validator, and is consumed by :mod:`gatekeeper.projection` and
:mod:`gatekeeper.audit` without modification.
"""

from typing import NamedTuple, Optional, Tuple


class ErrorKind(object):
    """Classification of a validation failure."""

    NONE = 'none'
    """The request is valid."""

    USER = 'user'
    """The failure is attributable to the end user or their session."""

    CLIENT = 'client'
    """The failure stems from the client's configuration or behavior."""

    KINDS = (NONE, USER, CLIENT)


class ResponseMode(object):
    """How result parameters are delivered back to the client."""

    QUERY = 'query'
    FRAGMENT = 'fragment'
    FORM_POST = 'form_post'
    MODES = (QUERY, FRAGMENT, FORM_POST)


class UserContext(NamedTuple):
    """The authenticated end user on whose behalf the request is made."""

    user_id: str
    username: str = ''
    email: str = ''


class RequestContext(NamedTuple):
    """Request-scoped values threaded through the endpoint pipeline."""

    request_id: str
    """Correlation ID, assigned once by the hosting layer."""

    user: Optional[UserContext] = None
    """The signed-in user, if any."""

    remote_addr: Optional[str] = None


class ValidatedAuthorizeRequest(NamedTuple):
    """
    The parsed, internally-consistent authorize request.

    On the error path this holds whatever subset of the request the
    validator was able to resolve, so that an error can be echoed back to the
    client.
    """

    client_id: str = ''
    """Public identifier of the client."""

    client_name: str = ''
    """Display name of the client; empty if the client was not resolved."""

    redirect_uri: str = ''
    """Absolute URI. Required to attempt any echo back to the client."""

    state: str = ''
    """Opaque value supplied by the client, echoed verbatim."""

    response_mode: str = ResponseMode.QUERY
    """Must be one of :attr:`ResponseMode.MODES`."""

    response_type: str = ''
    scopes: Tuple[str, ...] = ()


class ValidationOutcome(NamedTuple):
    """Immutable result of validating one authorize request."""

    is_error: bool
    error_kind: str = ErrorKind.NONE
    """Must be one of :attr:`ErrorKind.KINDS`."""

    error_code: str = ''
    """Stable machine-readable token, e.g. ``invalid_scope``."""

    validated_request: Optional[ValidatedAuthorizeRequest] = None
    error_description: str = ''

    @classmethod
    def success(cls, request: ValidatedAuthorizeRequest) \
            -> 'ValidationOutcome':
        """Create an outcome for a valid request."""
        return cls(is_error=False, validated_request=request)

    @classmethod
    def failure(cls, error_code: str, error_kind: str = ErrorKind.CLIENT,
                request: Optional[ValidatedAuthorizeRequest] = None,
                description: str = '') -> 'ValidationOutcome':
        """Create an outcome for a request that failed validation."""
        return cls(is_error=True, error_kind=error_kind,
                   error_code=error_code, validated_request=request,
                   error_description=description)


class ReturnInfo(NamedTuple):
    """A safe target for sending the user back to the client after an error."""

    client_id: str
    client_name: str
    uri: str
    """
    The reconstructed URI, carrying the error and state.

    For ``form_post`` this is the form action; the values to post are in
    :attr:`parameters`.
    """

    response_mode: str = ResponseMode.QUERY
    parameters: Tuple[Tuple[str, str], ...] = ()


class ErrorResponseModel(NamedTuple):
    """View model for the authorize error page."""

    request_id: str
    error_code: str
    error_message: str
    """Localized text; never empty."""

    return_info: Optional[ReturnInfo] = None
