"""
Registered clients, as far as the authorize endpoint needs to know them.

Registrations are loaded from the ``CLIENTS`` config parameter (a list of
dicts) or from the JSON file named by ``CLIENTS_FILE``.
"""

import json
import logging
from typing import NamedTuple, Tuple, Dict, Optional, Iterable, Any

from flask import Flask

from .exceptions import ClientConfigurationError

logger = logging.getLogger(__name__)


class Client(NamedTuple):
    """A client registered to request authorization."""

    client_id: str
    name: str
    redirect_uris: Tuple[str, ...]
    """Exact-match redirect URIs. The first is the default."""

    response_types: Tuple[str, ...] = ('code',)
    scopes: Tuple[str, ...] = ()
    """Scopes the client may request."""

    @property
    def default_redirect_uri(self) -> Optional[str]:
        """Get the redirect URI to use when the request does not name one."""
        return self.redirect_uris[0] if self.redirect_uris else None

    def check_redirect_uri(self, redirect_uri: str) -> bool:
        """Check that the redirect URI is registered for this client."""
        return redirect_uri in self.redirect_uris

    def check_response_type(self, response_type: str) -> bool:
        """Check that the client may use the response type."""
        return response_type in self.response_types

    def check_requested_scopes(self, scopes: Iterable[str]) -> bool:
        """Check that every requested scope is allowed for the client."""
        return set(self.scopes).issuperset(scopes)


def from_dict(data: Dict[str, Any]) -> Client:
    """Build a :class:`.Client` from a registration record."""
    try:
        return Client(
            client_id=data['client_id'],
            name=data.get('name', data['client_id']),
            redirect_uris=tuple(data.get('redirect_uris', ())),
            response_types=tuple(data.get('response_types', ('code',))),
            scopes=tuple(data.get('scopes', ()))
        )
    except (KeyError, TypeError) as e:
        raise ClientConfigurationError(f'Bad client registration: {e}') from e


class ClientStore(object):
    """In-memory lookup of client registrations."""

    def __init__(self, clients: Iterable[Client] = ()) -> None:
        """Index the registrations by client ID."""
        self._clients = {client.client_id: client for client in clients}
        logger.debug('Loaded %i clients', len(self._clients))

    def get(self, client_id: str) -> Optional[Client]:
        """Get a client by ID, or ``None`` if it is not registered."""
        return self._clients.get(client_id)

    @classmethod
    def from_config(cls, app: Flask) -> 'ClientStore':
        """Load registrations from the application config."""
        records = list(app.config.get('CLIENTS') or [])
        path = app.config.get('CLIENTS_FILE')
        if path:
            logger.debug('Loading clients from %s', path)
            try:
                with open(path) as f:
                    records.extend(json.load(f))
            except (OSError, ValueError) as e:
                raise ClientConfigurationError(
                    f'Could not load clients from {path}: {e}'
                ) from e
        return cls([from_dict(record) for record in records])
