"""
AWS client management and target region resolution
"""

import logging
import os

import boto3

from health_events_reporter.models import RegionNotConfiguredError
from health_events_reporter.utils.config import HEALTH_API_REGION


def get_health_client(session=None):
    """
    Get AWS Health client

    The Health API is only served from its control-plane region, whatever
    region the events are being reported for.
    """
    session = session or boto3.session.Session()
    return session.client("health", region_name=HEALTH_API_REGION)


def resolve_target_region(region=None, session=None):
    """
    Resolve the region whose events are reported

    Args:
        region (str, optional): Region given on the command line, used verbatim
        session (boto3.session.Session, optional): Session for default lookup

    Returns:
        str: Region name

    Raises:
        RegionNotConfiguredError: No region given and no default configured
    """
    if region is not None:
        return region

    session = session or boto3.session.Session()
    # Fall back to AWS_REGION when the profile chain sets nothing
    default_region = session.region_name or os.environ.get("AWS_REGION")
    if not default_region:
        raise RegionNotConfiguredError(
            "no default region was set; pass --region or configure AWS_REGION"
        )

    logging.debug(f"Using default region from environment: {default_region}")
    return default_region
