"""
Projects a failed :class:`.ValidationOutcome` onto the error page model.

Projection has no side effects: calling :func:`project` twice with the same
outcome and request ID yields equal models. User and client errors currently
produce the same page; :attr:`.ValidationOutcome.error_kind` is carried to
the audit event instead.
"""

import logging
from typing import Optional, Tuple

from .domain import ValidationOutcome, ErrorResponseModel, ReturnInfo, \
    ResponseMode
from .services.localization import Localization
from . import returns

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = 'unknown_error'
"""Used in place of an empty error code, so the message is never empty."""


def project(outcome: ValidationOutcome, request_id: str,
            localization: Localization) -> ErrorResponseModel:
    """
    Build the error page model for a failed authorize request.

    Parameters
    ----------
    outcome : :class:`.ValidationOutcome`
        Must have ``is_error`` set.
    request_id : str
        Correlation ID of the current request; copied verbatim.
    localization : :class:`.Localization`
        Resolves ``error_code`` to human-readable text.

    Returns
    -------
    :class:`.ErrorResponseModel`

    """
    return ErrorResponseModel(
        request_id=request_id,
        error_code=outcome.error_code,
        error_message=get_error_message(outcome.error_code, localization),
        return_info=get_return_info(outcome)
    )


def get_error_message(error_code: str, localization: Localization) -> str:
    """Resolve the localized message for an error code, never empty."""
    code = error_code or UNKNOWN_ERROR
    try:
        message = localization.resolve(code)
    except Exception as e:
        logger.warning('Localization failed for %s: %s', code, e)
        return code
    if not message:
        logger.debug('No localized message for %s', code)
        return code
    return message


def get_return_info(outcome: ValidationOutcome) -> Optional[ReturnInfo]:
    """Build the echo back to the client, if a safe target exists."""
    validated = outcome.validated_request
    params = [('error', outcome.error_code or UNKNOWN_ERROR)]
    if outcome.error_description:
        params.append(('error_description', outcome.error_description))
    uri = returns.reconstruct(validated, params)
    if uri is None:
        return None
    parameters: Tuple[Tuple[str, str], ...] = ()
    if validated.response_mode == ResponseMode.FORM_POST:
        parameters = tuple(returns.get_parameters(validated, params))
    return ReturnInfo(
        client_id=validated.client_id,
        client_name=validated.client_name,
        uri=uri,
        response_mode=validated.response_mode,
        parameters=parameters
    )
