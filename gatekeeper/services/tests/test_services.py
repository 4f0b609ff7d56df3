"""Tests for the default collaborators in :mod:`gatekeeper.services`."""

import json
import os
import tempfile
from datetime import datetime, timedelta
from unittest import TestCase

import jwt
from flask import Flask
from pytz import UTC

from ...domain import ErrorKind, ValidationOutcome
from ...events import EndpointName
from ... import audit
from .. import users, events
from ..clients import ClientStore, Client, from_dict
from ..exceptions import ClientConfigurationError, ExpiredToken, \
    InvalidToken
from ..localization import MessageCatalog


class TestMessageCatalog(TestCase):
    """Tests for :class:`.MessageCatalog`."""

    def setUp(self):
        self.catalog = MessageCatalog('de', 'en', messages={
            'en': {'foo': 'foo error message', 'bar': 'bar message'},
            'de': {'foo': 'Fehlermeldung foo'}
        })

    def test_resolve(self):
        """Messages are looked up in the current locale first."""
        self.assertEqual(self.catalog.resolve('foo'), 'Fehlermeldung foo')

    def test_fallback_to_default_locale(self):
        """Missing messages are looked up in the default locale."""
        self.assertEqual(self.catalog.resolve('bar'), 'bar message')

    def test_miss(self):
        """A missing key is not an error."""
        self.assertIsNone(self.catalog.resolve('baz'))

    def test_default_messages(self):
        """The standard error codes have English messages."""
        catalog = MessageCatalog()
        for code in ('invalid_request', 'invalid_scope', 'login_required',
                     'unauthorized_client', 'unknown_error'):
            self.assertTrue(catalog.resolve(code))


class TestClientStore(TestCase):
    """Tests for :class:`.ClientStore`."""

    def setUp(self):
        self.app = Flask('test')
        self.record = {
            'client_id': 'foo_client',
            'name': 'Foo Client',
            'redirect_uris': ['https://foo.com/cb'],
            'scopes': ['openid']
        }

    def test_from_config(self):
        """Clients can be registered in the config."""
        self.app.config['CLIENTS'] = [self.record]
        store = ClientStore.from_config(self.app)
        client = store.get('foo_client')
        self.assertEqual(client.name, 'Foo Client')
        self.assertEqual(client.response_types, ('code',))
        self.assertEqual(client.default_redirect_uri, 'https://foo.com/cb')
        self.assertIsNone(store.get('nope'))

    def test_from_file(self):
        """Clients can be registered in a JSON file."""
        with tempfile.NamedTemporaryFile('w', suffix='.json',
                                         delete=False) as f:
            json.dump([self.record], f)
        self.addCleanup(os.remove, f.name)
        self.app.config['CLIENTS_FILE'] = f.name
        store = ClientStore.from_config(self.app)
        self.assertTrue(store.get('foo_client').check_redirect_uri(
            'https://foo.com/cb'
        ))

    def test_missing_file(self):
        """A missing clients file is a configuration error."""
        self.app.config['CLIENTS_FILE'] = '/does/not/exist.json'
        with self.assertRaises(ClientConfigurationError):
            ClientStore.from_config(self.app)

    def test_bad_record(self):
        """A registration without a client ID is a configuration error."""
        with self.assertRaises(ClientConfigurationError):
            from_dict({'name': 'Nameless'})

    def test_checks(self):
        client = Client('c', 'C', ('https://c/cb',), ('code',), ('a', 'b'))
        self.assertTrue(client.check_requested_scopes(['a']))
        self.assertTrue(client.check_requested_scopes([]))
        self.assertFalse(client.check_requested_scopes(['a', 'c']))
        self.assertFalse(client.check_redirect_uri('https://c/cb/'))
        self.assertFalse(client.check_response_type('token'))
        self.assertIsNone(Client('d', 'D', ()).default_redirect_uri)


class TestLoadUser(TestCase):
    """Tests for :mod:`gatekeeper.services.users`."""

    def setUp(self):
        self.secret = 'foosecret'

    def test_decode(self):
        """A valid session token yields the user."""
        token = jwt.encode({'user_id': 1234, 'username': 'foouser',
                            'email': 'foo@bar.com'}, self.secret)
        user = users.load_user(token, self.secret)
        self.assertEqual(user.user_id, '1234')
        self.assertEqual(user.username, 'foouser')
        self.assertEqual(user.email, 'foo@bar.com')

    def test_no_token(self):
        self.assertIsNone(users.load_user(None, self.secret))
        self.assertIsNone(users.load_user('', self.secret))

    def test_wrong_secret(self):
        """A token signed with another secret is not accepted."""
        token = jwt.encode({'user_id': '1234'}, 'nottherightsecret')
        with self.assertRaises(InvalidToken):
            users.decode(token, self.secret)
        self.assertIsNone(users.load_user(token, self.secret))

    def test_not_a_token(self):
        self.assertIsNone(users.load_user('definitelynotatoken', self.secret))

    def test_missing_user_id(self):
        token = jwt.encode({'session_id': 'ajx9043jjx00s'}, self.secret)
        with self.assertRaises(InvalidToken):
            users.decode(token, self.secret)

    def test_token_errors_are_runtime_errors(self):
        """Token failures are not mistaken for malformed input values."""
        token = jwt.encode({'user_id': '1234'}, 'nottherightsecret')
        with self.assertRaises(RuntimeError):
            users.decode(token, self.secret)
        self.assertFalse(issubclass(InvalidToken, ValueError))
        self.assertTrue(issubclass(ExpiredToken, RuntimeError))

    def test_expired(self):
        """An expired token yields no user."""
        expired = datetime.now(tz=UTC) - timedelta(seconds=10)
        token = jwt.encode({'user_id': '1234', 'exp': expired}, self.secret)
        with self.assertRaises(ExpiredToken):
            users.decode(token, self.secret)
        self.assertIsNone(users.load_user(token, self.secret))


class TestEventSinks(TestCase):
    """Tests for :mod:`gatekeeper.services.events`."""

    def setUp(self):
        self.event = audit.failure_event(
            ValidationOutcome.failure('invalid_scope', ErrorKind.CLIENT),
            EndpointName.AUTHORIZE
        )

    def test_logging_sink(self):
        """The logging sink writes the event as a structured record."""
        sink = events.LoggingEventSink('gatekeeper.test.events')
        with self.assertLogs('gatekeeper.test.events', level='INFO') as logs:
            sink.publish(self.event)
        self.assertEqual(len(logs.records), 1)
        record = logs.records[0]
        self.assertEqual(record.event['message'], 'invalid_scope')
        self.assertEqual(record.event['details']['endpoint_name'],
                         'Authorize')

    def test_null_sink(self):
        self.assertIsNone(events.NullEventSink().publish(self.event))

    def test_create_sink(self):
        """The sink is selected by name in the config."""
        app = Flask('test')
        app.config['EVENT_SINK'] = 'none'
        self.assertIsInstance(events.create_sink(app), events.NullEventSink)
        app.config['EVENT_SINK'] = 'log'
        self.assertIsInstance(events.create_sink(app),
                              events.LoggingEventSink)
        app.config['EVENT_SINK'] = 'carrier pigeon'
        with self.assertRaises(RuntimeError):
            events.create_sink(app)
