"""Flask configuration."""

import os

NAMESPACE = os.environ.get('NAMESPACE')
"""Namespace in which this service is deployed; to qualify keys for secrets."""

SECRET_KEY = os.environ.get('SECRET_KEY', 'asdf1234')
SERVER_NAME = os.environ.get('GATEKEEPER_SERVER_NAME')

LOGFILE = os.environ.get('LOGFILE')
LOGLEVEL = int(os.environ.get('LOGLEVEL', 20))
LOGJSON = bool(int(os.environ.get('LOGJSON', '1')))
"""If 1, log records are written as JSON objects."""

JWT_SECRET = os.environ.get('JWT_SECRET', 'foosecret')
AUTH_SESSION_COOKIE_NAME = os.environ.get('AUTH_SESSION_COOKIE_NAME',
                                          'GATEKEEPER_SESSION_ID')

AUTHORIZE_ALLOWED_METHODS = os.environ.get('AUTHORIZE_ALLOWED_METHODS',
                                           'GET,POST')
"""Comma-separated; may only contain ``GET`` and ``POST``."""

ERROR_PAGE_STATUS = int(os.environ.get('ERROR_PAGE_STATUS', 400))

REQUEST_ID_HEADER = os.environ.get('REQUEST_ID_HEADER', 'X-Request-ID')
"""Header carrying the correlation ID assigned by the ingress, if any."""

DEFAULT_LOCALE = os.environ.get('DEFAULT_LOCALE', 'en')

CLIENTS_FILE = os.environ.get('CLIENTS_FILE')
"""Path to a JSON file containing a list of client registrations."""

CLIENTS: list = []
"""Client registrations; mostly useful for testing."""

EVENT_SINK = os.environ.get('EVENT_SINK', 'log')
"""One of ``log`` or ``none``."""
