"""
Helpers for pulling fields out of raw AWS Health API payloads

Missing optional fields are replaced with fixed placeholders rather than
treated as errors.
"""

from health_events_reporter.utils.config import MISSING_ARN, MISSING_DESCRIPTION
from health_events_reporter.utils.helpers import format_event_time


def extract_event_arn(event):
    """
    Get the event ARN from a describe_events entry

    Args:
        event (dict): Event summary from the Health API

    Returns:
        str: Event ARN or "N/A"
    """
    arn = event.get("arn")
    return MISSING_ARN if arn is None else arn


def extract_event_description(event_details_response):
    """
    Take the latest description of the first successful detail entry

    Args:
        event_details_response (dict): describe_event_details response

    Returns:
        str: Description or "No description available"
    """
    successful_set = event_details_response.get("successfulSet") or []
    if not successful_set:
        return MISSING_DESCRIPTION

    event_description = successful_set[0].get("eventDescription") or {}
    latest = event_description.get("latestDescription")
    if latest is None:
        return MISSING_DESCRIPTION
    return latest


def extract_affected_resources(entities):
    """
    Extract affected resource values from Health API entities

    Entities without an entityValue are skipped.

    Args:
        entities (list): Entity objects from the Health API

    Returns:
        list: entityValue strings in API order
    """
    resources = []
    for entity in entities or []:
        entity_value = entity.get("entityValue")
        if entity_value is not None:
            resources.append(entity_value)
    return resources


def extract_event_timestamp(event):
    """Formatted startTime of an event, or "Unknown time" """
    return format_event_time(event.get("startTime"))
