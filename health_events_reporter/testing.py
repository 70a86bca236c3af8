"""
In-memory HealthService for exercising the fetcher and CLI without AWS
"""

import time

from health_events_reporter.aws_clients.health_client import HealthService


class FakeHealthService(HealthService):
    """
    In-memory HealthService

    details and entities are keyed by event ARN; a missing key means the
    API returned nothing for that event. fail_on makes listing
    ("list_events") or the detail lookup of that ARN raise;
    fail_entities_on does the same for the affected-entities lookup.
    delay is slept after recording each detail lookup.
    """

    def __init__(
        self,
        events=None,
        details=None,
        entities=None,
        fail_on=None,
        fail_entities_on=None,
        delay=0,
    ):
        self.events = events or []
        self.details = details or {}
        self.entities = entities or {}
        self.fail_on = fail_on
        self.fail_entities_on = fail_entities_on
        self.delay = delay
        self.calls = []

    def list_events(self, window, region):
        self.calls.append(("list_events", window, region))
        if self.fail_on == "list_events":
            raise RuntimeError("list_events failed")
        return list(self.events)

    def describe_event_detail(self, event_arn):
        self.calls.append(("describe_event_detail", event_arn))
        if self.fail_on == event_arn:
            raise RuntimeError(f"describe_event_detail failed for {event_arn}")
        if self.delay:
            time.sleep(self.delay)
        description = self.details.get(event_arn)
        if description is None:
            return {"successfulSet": [], "failedSet": [{"eventArn": event_arn}]}
        return {
            "successfulSet": [
                {
                    "event": {"arn": event_arn},
                    "eventDescription": {"latestDescription": description},
                }
            ],
            "failedSet": [],
        }

    def describe_affected_entities(self, event_arn):
        self.calls.append(("describe_affected_entities", event_arn))
        if self.fail_entities_on == event_arn:
            raise RuntimeError(f"describe_affected_entities failed for {event_arn}")
        return [{"entityValue": value} for value in self.entities.get(event_arn, [])]

    def calls_to(self, operation):
        return [call for call in self.calls if call[0] == operation]
