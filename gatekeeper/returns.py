"""
Reconstruction of the URI used to send the user back to the client.

The reconstructor only assembles the redirect target and ``state``. Which
error parameters ride along is decided by :mod:`gatekeeper.projection`.
"""

from typing import List, Optional, Sequence, Tuple

from authlib.common.urls import add_params_to_uri

from .domain import ValidatedAuthorizeRequest, ResponseMode

Params = Sequence[Tuple[str, str]]


def get_parameters(validated_request: ValidatedAuthorizeRequest,
                   params: Params = ()) -> List[Tuple[str, str]]:
    """
    Get the ordered parameter set to deliver to the client.

    Parameters
    ----------
    validated_request : :class:`.ValidatedAuthorizeRequest`
    params : list
        Name/value pairs supplied by the caller, e.g. ``error``. These come
        first, in the order given.

    Returns
    -------
    list
        Caller parameters, followed by ``state`` if the request has one.

    """
    parameters = [(name, value) for name, value in params]
    if validated_request.state:
        parameters.append(('state', validated_request.state))
    return parameters


def reconstruct(validated_request: Optional[ValidatedAuthorizeRequest],
                params: Params = ()) -> Optional[str]:
    """
    Build the URI to which the user may be sent back.

    Parameters
    ----------
    validated_request : :class:`.ValidatedAuthorizeRequest` or None
    params : list
        Additional name/value pairs to deliver along with ``state``.

    Returns
    -------
    str or None
        ``None`` if there is no safe target (no request, or no redirect URI).
        For ``fragment`` mode the parameters are appended as the URI
        fragment; for ``query`` mode they are merged into the existing query
        string. For ``form_post`` the redirect URI is returned as-is, and the
        caller must post :func:`get_parameters` to it.

    """
    if validated_request is None or not validated_request.redirect_uri:
        return None
    uri = validated_request.redirect_uri
    mode = validated_request.response_mode
    if mode == ResponseMode.FORM_POST:
        return uri
    parameters = get_parameters(validated_request, params)
    if not parameters:
        return uri
    return add_params_to_uri(uri, parameters,
                             fragment=(mode == ResponseMode.FRAGMENT))
