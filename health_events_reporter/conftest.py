"""
Shared fixtures
"""

from datetime import datetime, timezone

import pytest

from health_events_reporter.testing import FakeHealthService


@pytest.fixture
def outage_service():
    """One event with a description and two affected entities"""
    return FakeHealthService(
        events=[
            {
                "arn": "arn:1",
                "region": "us-east-1",
                "startTime": datetime(2024, 1, 1, tzinfo=timezone.utc),
            }
        ],
        details={"arn:1": "Outage"},
        entities={"arn:1": ["res-1", "res-2"]},
    )
