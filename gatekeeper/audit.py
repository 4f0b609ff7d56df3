"""Translates validation outcomes into audit events."""

import logging
from datetime import datetime
from typing import Optional

from pytz import UTC

from .domain import ValidationOutcome, RequestContext
from .events import Event, EndpointDetail, EventType, EventCategory, \
    ENDPOINT_FAILURE, EVENT_NAMES
from .services.events import EventSink

logger = logging.getLogger(__name__)


def failure_event(outcome: ValidationOutcome, endpoint_name: str,
                  context: Optional[RequestContext] = None) -> Event:
    """
    Build an endpoint failure event for a failed outcome.

    The message is the raw error code, never the localized text, so that
    audit records stay machine-parseable.
    """
    return Event(
        category=EventCategory.ENDPOINTS,
        name=EVENT_NAMES[ENDPOINT_FAILURE],
        event_type=EventType.FAILURE,
        id=ENDPOINT_FAILURE,
        message=outcome.error_code,
        details=EndpointDetail(endpoint_name=endpoint_name,
                               error_kind=outcome.error_kind),
        timestamp=datetime.now(tz=UTC),
        request_id=context.request_id if context else None,
        remote_addr=context.remote_addr if context else None
    )


def emit(outcome: ValidationOutcome, endpoint_name: str, sink: EventSink,
         context: Optional[RequestContext] = None) -> None:
    """
    Publish a failure event for ``outcome`` to ``sink``.

    Parameters
    ----------
    outcome : :class:`.ValidationOutcome`
    endpoint_name : str
        One of :class:`.EndpointName`.
    sink : :class:`.EventSink`
    context : :class:`.RequestContext`
        Used to correlate the event with the request.

    Failures are logged and discarded; they never propagate to the caller.
    """
    try:
        event = failure_event(outcome, endpoint_name, context)
        sink.publish(event)
    except Exception:
        logger.exception('Could not emit %s failure event for %s',
                         endpoint_name, outcome.error_code)
