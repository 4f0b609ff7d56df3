"""Stub collaborators for testing the authorize endpoint."""

from typing import List, Mapping, Optional

from ..domain import ValidationOutcome, UserContext
from ..events import Event
from ..services.events import EventSink
from ..services.localization import Localization


class StubRequestValidator(object):
    """Returns a canned outcome, and records what it was asked."""

    def __init__(self, outcome: ValidationOutcome) -> None:
        self.outcome = outcome
        self.calls: List[tuple] = []

    def validate(self, parameters: Mapping[str, str],
                 user: Optional[UserContext]) -> ValidationOutcome:
        self.calls.append((parameters, user))
        return self.outcome


class StubLocalization(Localization):
    """Resolves every key to :attr:`result`."""

    def __init__(self, result: Optional[str] = None) -> None:
        self.result = result

    def resolve(self, key: str) -> Optional[str]:
        return self.result


class MockEventSink(EventSink):
    """Keeps published events."""

    def __init__(self) -> None:
        self.events: List[Event] = []

    def publish(self, event: Event) -> None:
        self.events.append(event)

    def assert_event_was_raised(self) -> Event:
        assert len(self.events) == 1, f'Expected one event: {self.events}'
        return self.events[0]


class FailingEventSink(EventSink):
    """Cannot publish anything."""

    def publish(self, event: Event) -> None:
        raise ConnectionError('Sink is unavailable')
