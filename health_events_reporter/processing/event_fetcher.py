"""
Health event fetching: list events, then look up detail and affected
entities for each one and flatten the results into HealthEvent records
"""

import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait

from health_events_reporter.models import HealthEvent
from health_events_reporter.utils.event_helpers import (
    extract_affected_resources,
    extract_event_arn,
    extract_event_description,
    extract_event_timestamp,
)


def build_health_event(service, event):
    """
    Look up detail and affected entities for one listed event

    Args:
        service (HealthService): Health API capability
        event (dict): Event summary from list_events

    Returns:
        HealthEvent: Flattened record
    """
    arn = extract_event_arn(event)

    event_details = service.describe_event_detail(arn)
    entities = service.describe_affected_entities(arn)

    return HealthEvent(
        timestamp=extract_event_timestamp(event),
        arn=arn,
        detail=extract_event_description(event_details),
        affected_entities=tuple(extract_affected_resources(entities)),
    )


def fetch_health_events(service, window, region, max_workers=1):
    """
    Fetch health events for a window and region

    Output order is the listing order. With max_workers > 1 the per-event
    lookups run on a thread pool; on the first failure queued lookups are
    cancelled, the error is re-raised and no partial results are returned.

    Args:
        service (HealthService): Health API capability
        window (TimeWindow): Event start-time range
        region (str): Region to report on
        max_workers (int): Concurrent per-event lookups

    Returns:
        list: HealthEvent records
    """
    events = service.list_events(window, region)
    event_count = len(events)
    logging.info(f"Processing {event_count} events for region {region}")

    if max_workers <= 1 or event_count <= 1:
        health_events = []
        for i, event in enumerate(events, 1):
            logging.debug(f"Processing event {i}/{event_count}: {event.get('arn')}")
            health_events.append(build_health_event(service, event))
        return health_events

    executor = ThreadPoolExecutor(max_workers=max_workers)
    futures = [executor.submit(build_health_event, service, event) for event in events]
    done, _ = wait(futures, return_when=FIRST_EXCEPTION)

    failed = [future for future in futures if future in done and future.exception()]
    if failed:
        # Queued lookups are dropped; only those already running finish
        executor.shutdown(wait=False, cancel_futures=True)
        logging.error(f"Event lookup failed, cancelled {len(futures) - len(done)} pending lookups")
        raise failed[0].exception()

    executor.shutdown()
    # Collect in submission order so output matches the listing
    return [future.result() for future in futures]
