"""Audit event sinks."""

import json
import logging

from flask import Flask

from ..events import Event

logger = logging.getLogger(__name__)


class EventSink(object):
    """Receives audit events. Publishing is fire-and-forget."""

    def publish(self, event: Event) -> None:
        """Publish an event."""
        raise NotImplementedError('Implement in a subclass')


class NullEventSink(EventSink):
    """Discards all events."""

    def publish(self, event: Event) -> None:
        """Do nothing."""


class LoggingEventSink(EventSink):
    """Writes each event as a structured record to a dedicated logger."""

    def __init__(self, name: str = 'gatekeeper.audit.events') -> None:
        """Set the name of the logger to which events are written."""
        self._logger = logging.getLogger(name)

    def publish(self, event: Event) -> None:
        """Log the event, with its fields as structured extras."""
        data = event.to_dict()
        self._logger.info('%s: %s', event.name, json.dumps(data),
                          extra={'event': data})


_SINKS = {
    'log': LoggingEventSink,
    'none': NullEventSink,
}


def create_sink(app: Flask) -> EventSink:
    """Instantiate the sink named by ``EVENT_SINK`` in the app config."""
    name = app.config.get('EVENT_SINK', 'log')
    try:
        sink_class = _SINKS[name]
    except KeyError as e:
        raise RuntimeError(f'Configuration error: no such sink {name}') from e
    logger.debug('Using event sink %s', name)
    return sink_class()
