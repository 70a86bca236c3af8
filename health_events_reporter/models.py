"""
Records and error types shared by the resolver, fetcher and emitter
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Tuple


class HealthReportError(Exception):
    """Base class for fatal reporter errors"""


class RegionNotConfiguredError(HealthReportError):
    """Raised when no target region was given and none can be resolved"""


@dataclass(frozen=True)
class TimeWindow:
    """Event-start-time range used to filter Health events (UTC bounds)"""

    start: datetime
    end: datetime

    def as_filter(self):
        """Return the window as a Health API dateTimeRange"""
        return {"from": self.start, "to": self.end}


@dataclass(frozen=True)
class HealthEvent:
    """One flattened output record per Health event"""

    timestamp: str
    arn: str
    detail: str
    affected_entities: Tuple[str, ...] = ()

    def affected_entities_cell(self) -> str:
        return ", ".join(self.affected_entities)

    def to_csv_row(self) -> List[str]:
        return [
            self.timestamp,
            self.arn,
            self.detail,
            self.affected_entities_cell(),
        ]
