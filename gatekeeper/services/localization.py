"""
Resolves message keys to human-readable text.

A missing key is a normal outcome and yields ``None``; callers decide how to
fall back.
"""

import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)

MESSAGES: Dict[str, Dict[str, str]] = {
    'en': {
        'invalid_request': 'The request is missing a required parameter, or'
                           ' is otherwise malformed.',
        'unauthorized_client': 'The client is not authorized to request'
                               ' authorization in this way.',
        'access_denied': 'The request was denied.',
        'unsupported_response_type': 'The client requested a response type'
                                     ' that is not supported.',
        'unsupported_response_mode': 'The client requested a response mode'
                                     ' that is not supported.',
        'invalid_scope': 'The requested scope is invalid, unknown, or'
                         ' malformed.',
        'invalid_redirect_uri': 'The redirect URI is not registered for'
                                ' this client.',
        'server_error': 'The server encountered an unexpected condition.',
        'temporarily_unavailable': 'The server is temporarily unable to'
                                   ' handle the request.',
        'login_required': 'You must log in to continue.',
        'consent_required': 'Your consent is required to continue.',
        'interaction_required': 'Further interaction is required to'
                                ' continue.',
        'unknown_client': 'The client application is unknown.',
        'unknown_error': 'An unknown error occurred.',
    },
}


class Localization(object):
    """Resolves message keys."""

    def resolve(self, key: str) -> Optional[str]:
        """Get the text for ``key``, or ``None`` if there is none."""
        raise NotImplementedError('Implement in a subclass')


class MessageCatalog(Localization):
    """
    Looks up messages in per-locale tables.

    Keys missing from the requested locale are looked up in the default
    locale before giving up.
    """

    def __init__(self, locale: str = 'en', default_locale: str = 'en',
                 messages: Optional[Dict[str, Dict[str, str]]] = None) \
            -> None:
        """Set the locale, and the message tables to use."""
        self.locale = locale
        self.default_locale = default_locale
        self._messages = MESSAGES if messages is None else messages

    def resolve(self, key: str) -> Optional[str]:
        """Get the text for ``key`` in the current locale."""
        for locale in (self.locale, self.default_locale):
            message = self._messages.get(locale, {}).get(key)
            if message:
                return message
        logger.debug('No message for %s in %s', key, self.locale)
        return None
