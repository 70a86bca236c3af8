"""
AWS Health API access

HealthService is the capability the fetcher depends on; Boto3HealthService
implements it on a boto3 "health" client. Errors from botocore are not
caught here: any failed call aborts the run.
"""

import logging
from abc import ABC, abstractmethod

from health_events_reporter.aws_clients.client_manager import get_health_client

EVENTS_PAGE_SIZE = 100
ENTITIES_PAGE_SIZE = 100


class HealthService(ABC):
    """The three Health API operations the reporter relies on"""

    @abstractmethod
    def list_events(self, window, region):
        """Return every event in region whose start time falls in window"""

    @abstractmethod
    def describe_event_detail(self, event_arn):
        """Return the describe_event_details response for a single event"""

    @abstractmethod
    def describe_affected_entities(self, event_arn):
        """Return every affected entity of an event, in API order"""


class Boto3HealthService(HealthService):
    """HealthService backed by a boto3 Health client"""

    def __init__(self, health_client=None):
        self.health_client = health_client or get_health_client()
        logging.debug(
            f"Health client region: {self.health_client.meta.region_name}"
        )

    def list_events(self, window, region):
        """
        Fetch health events from AWS Health API with pagination

        Args:
            window (TimeWindow): Event start-time range
            region (str): Region to report on

        Returns:
            list: Event summaries in listing order
        """
        filter_dict = {"regions": [region], "startTimes": [window.as_filter()]}

        paginator = self.health_client.get_paginator("describe_events")
        all_events = []
        page_count = 0

        for page in paginator.paginate(filter=filter_dict, maxResults=EVENTS_PAGE_SIZE):
            page_count += 1
            page_events = page.get("events", [])
            all_events.extend(page_events)
            logging.debug(
                f"Page {page_count}: Retrieved {len(page_events)} events (total: {len(all_events)})"
            )

        logging.info(f"Retrieved {len(all_events)} events across {page_count} page(s)")
        return all_events

    def describe_event_detail(self, event_arn):
        logging.debug(f"Fetching event details for {event_arn}")
        return self.health_client.describe_event_details(eventArns=[event_arn])

    def describe_affected_entities(self, event_arn):
        """
        Fetch all affected entities for an event with pagination support

        Args:
            event_arn (str): ARN of the health event

        Returns:
            list: Entity objects
        """
        paginator = self.health_client.get_paginator("describe_affected_entities")
        entities = []

        for page in paginator.paginate(
            filter={"eventArns": [event_arn]}, maxResults=ENTITIES_PAGE_SIZE
        ):
            entities.extend(page.get("entities", []))

        logging.debug(f"Fetched {len(entities)} affected entities for event {event_arn}")
        return entities
