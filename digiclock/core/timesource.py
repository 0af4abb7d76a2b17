from __future__ import annotations

from datetime import datetime
from typing import Callable

from digiclock.core.events import TimeChanged
from textual import log
from textual.reactive import reactive
from textual.timer import Timer
from textual.widget import Widget


class TimeSource(Widget):
    """
    A widget holding the current wall-clock instant as reactive state.

    While mounted it owns exactly one interval timer that replaces the
    instant on every tick. The timer is started on mount and stopped on
    unmount, never on re-render. Subclasses display the instant by
    extending `watch_current_instant`.
    """
    INTERVAL: float = 1.0

    current_instant: reactive[datetime | None] = reactive(None, always_update=True, init=False)

    def __init__(self, **kwargs):
        self.interval: float = kwargs.pop("interval", self.INTERVAL)
        self.now: Callable[[], datetime] = kwargs.pop("now", datetime.now)
        if self.interval <= 0:
            raise ValueError(f"Refresh interval must be positive, got {self.interval}")

        super().__init__(**kwargs)
        self._refresh_timer: Timer | None = None

    # ┌───────────────────────────────────────────────────────────────────────┐
    # │ Lifecycle                                                             │
    # └───────────────────────────────────────────────────────────────────────┘

    def on_mount(self) -> None:
        self.activate()

    def on_unmount(self) -> None:
        self.deactivate()

    @property
    def is_active(self) -> bool:
        return self._refresh_timer is not None

    def activate(self) -> None:
        """Captures the current instant and starts the refresh timer."""
        if self._refresh_timer is not None:
            log(f"{self} is already active, keeping its timer.")
            return

        self.current_instant = self.now()
        self._refresh_timer = self.set_interval(
            self.interval, self.tick, name=f"{self.__class__.__name__} refresh"
        )
        log(f"{self} activated, refreshing every {self.interval}s.")

    def deactivate(self) -> None:
        """Stops the refresh timer and drops the held instant. No-op when inactive."""
        timer, self._refresh_timer = self._refresh_timer, None
        if timer is None:
            return
        timer.stop()
        self.set_reactive(TimeSource.current_instant, None)
        log(f"{self} deactivated.")

    def tick(self) -> None:
        self.current_instant = self.now()

    # ┌───────────────────────────────────────────────────────────────────────┐
    # │ Watchers                                                              │
    # └───────────────────────────────────────────────────────────────────────┘

    def watch_current_instant(self, instant: datetime | None) -> None:
        if instant is not None:
            self.post_message(TimeChanged(self, instant))
