"""
Audit event model.

Events are structured and locale-independent. They are handed to an event
sink (see :mod:`gatekeeper.services.events`) which persists or forwards them.
"""

from datetime import datetime
from typing import NamedTuple, Optional, Any, Dict


class EventType(object):
    """Severity of an event."""

    SUCCESS = 'Success'
    FAILURE = 'Failure'
    INFORMATION = 'Information'
    WARNING = 'Warning'
    ERROR = 'Error'


class EventCategory(object):
    """Broad grouping of events."""

    ENDPOINTS = 'Endpoints'


ENDPOINT_SUCCESS = 3000
ENDPOINT_FAILURE = 3001

EVENT_NAMES = {
    ENDPOINT_SUCCESS: 'Endpoint Success',
    ENDPOINT_FAILURE: 'Endpoint Failure',
}


class EndpointName(object):
    """Fixed identifiers of protocol endpoints."""

    AUTHORIZE = 'Authorize'
    TOKEN = 'Token'
    USER_INFO = 'UserInfo'
    END_SESSION = 'EndSession'
    INTROSPECTION = 'Introspection'
    REVOCATION = 'Revocation'


class EndpointDetail(NamedTuple):
    """Details of an endpoint event."""

    endpoint_name: str
    error_kind: Optional[str] = None
    """Classification of the failure, for differential handling downstream."""


class Event(NamedTuple):
    """A single audit event."""

    category: str
    name: str
    event_type: str
    id: int
    message: str
    details: EndpointDetail
    timestamp: datetime
    request_id: Optional[str] = None
    remote_addr: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Get a JSON-serializable representation of the event."""
        data = self._asdict()
        data['details'] = self.details._asdict()
        data['timestamp'] = self.timestamp.isoformat()
        return data
