"""Tests for :mod:`gatekeeper.audit`."""

import json
from unittest import TestCase, mock

from ..domain import ValidationOutcome, ErrorKind, RequestContext
from ..events import EventType, EventCategory, EndpointName, \
    ENDPOINT_FAILURE
from .. import audit
from .util import MockEventSink, FailingEventSink


class TestEmit(TestCase):
    """Tests for :func:`audit.emit`."""

    def setUp(self):
        self.outcome = ValidationOutcome.failure('some error',
                                                 ErrorKind.CLIENT)
        self.sink = MockEventSink()

    def test_emit(self):
        """A single endpoint failure event is published."""
        context = RequestContext(request_id='abc', remote_addr='10.0.0.1')
        audit.emit(self.outcome, EndpointName.AUTHORIZE, self.sink, context)
        event = self.sink.assert_event_was_raised()
        self.assertEqual(event.category, EventCategory.ENDPOINTS)
        self.assertEqual(event.name, 'Endpoint Failure')
        self.assertEqual(event.event_type, EventType.FAILURE)
        self.assertEqual(event.id, ENDPOINT_FAILURE)
        self.assertEqual(event.message, 'some error')
        self.assertEqual(event.details.endpoint_name, 'Authorize')
        self.assertEqual(event.details.error_kind, ErrorKind.CLIENT)
        self.assertEqual(event.request_id, 'abc')
        self.assertEqual(event.remote_addr, '10.0.0.1')
        self.assertIsNotNone(event.timestamp.tzinfo)

    def test_emit_without_context(self):
        """The event can be emitted without a request context."""
        audit.emit(self.outcome, EndpointName.AUTHORIZE, self.sink)
        self.assertIsNone(self.sink.assert_event_was_raised().request_id)

    def test_event_is_serializable(self):
        """The event can be represented as JSON."""
        event = audit.failure_event(self.outcome, EndpointName.AUTHORIZE)
        data = json.loads(json.dumps(event.to_dict()))
        self.assertEqual(data['details']['endpoint_name'], 'Authorize')
        self.assertEqual(data['message'], 'some error')

    @mock.patch(f'{audit.__name__}.logger')
    def test_sink_failure_is_logged(self, mock_logger):
        """A failing sink is logged, and does not raise."""
        audit.emit(self.outcome, EndpointName.AUTHORIZE, FailingEventSink())
        self.assertEqual(mock_logger.exception.call_count, 1)
