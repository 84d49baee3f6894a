from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class ScraperStatus:
    region: str
    status: Literal["active", "syncing"]
    last_update: str
    docs_count: int


# Sample figures shown in the header banner; nothing refreshes them.
SYSTEM_STATUS: tuple[ScraperStatus, ...] = (
    ScraperStatus(region="India", status="active", last_update="10 mins ago", docs_count=5240),
    ScraperStatus(region="Singapore", status="active", last_update="2 mins ago", docs_count=3120),
    ScraperStatus(region="Malaysia", status="active", last_update="1 hour ago", docs_count=2890),
    ScraperStatus(region="UAE", status="syncing", last_update="Just now", docs_count=1540),
    ScraperStatus(region="Hong Kong", status="active", last_update="45 mins ago", docs_count=2100),
)

SYSTEM_STATUS_LINE = "System Operational • Latency: 45ms"
