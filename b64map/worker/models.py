import time
from dataclasses import dataclass, field
from datetime import timedelta


@dataclass
class RunStatistics:
    """Counters for one run. Lives only as long as the process."""

    documents: int = 0
    started_at: float = field(default_factory=time.monotonic)

    def elapsed(self) -> timedelta:
        return timedelta(seconds=time.monotonic() - self.started_at)
