from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from textual.message import Message

if TYPE_CHECKING:
    from digiclock.core.timesource import TimeSource

# =============================================================================
# Custom Messages
# =============================================================================


class TimeChanged(Message):
    """Posted every time a TimeSource replaces its current instant."""
    def __init__(self, source: TimeSource, instant: datetime) -> None:
        self.source = source
        self.instant = instant
        super().__init__()

    @property
    def control(self) -> TimeSource:
        return self.source
