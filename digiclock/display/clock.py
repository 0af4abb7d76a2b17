from __future__ import annotations

from datetime import datetime

import digiclock.display.glyphs as glyphs
from digiclock.core.timefmt import format_time
from digiclock.core.timesource import TimeSource
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.widgets import Label


class DigitalClock(TimeSource):
    """A live 12-hour clock rendering its instant into a single Label."""
    PAD_HOUR: bool = False

    DEFAULT_CLASSES = "clock"
    DEFAULT_CSS = """
    DigitalClock {
        width: auto;
        height: auto;
        padding: 0 2;
    }
    DigitalClock > #clock-text {
        text-style: bold;
    }
    """
    pad_hour = reactive(False, init=False)

    def __init__(self, **kwargs):
        pad_hour = kwargs.pop("pad_hour", self.PAD_HOUR)
        super().__init__(**kwargs)
        self.time_label = Label("", id="clock-text")
        self.set_reactive(DigitalClock.pad_hour, pad_hour)

    def compose(self) -> ComposeResult:
        yield self.time_label

    @property
    def time_text(self) -> str:
        """The string currently shown, empty until the first instant is captured."""
        if self.current_instant is None:
            return ""
        return format_time(self.current_instant, pad_hour=self.pad_hour)

    def watch_current_instant(self, instant: datetime | None) -> None:
        self.time_label.update(self.time_text)
        super().watch_current_instant(instant)

    def deactivate(self) -> None:
        super().deactivate()
        self.time_label.update(self.time_text)

    def watch_pad_hour(self) -> None:
        self.time_label.update(self.time_text)


class ClockContainer(Container):
    """
    The outer wrapper of the clock display. Builds MAIN_WIDGET from the clock
    options it was given; everything else goes to the container itself.
    """
    MAIN_WIDGET: type[TimeSource] = DigitalClock
    CLOCK_OPTIONS = ("interval", "now", "pad_hour")

    DEFAULT_CLASSES = "clock-container"
    DEFAULT_CSS = """
    ClockContainer {
        align: center middle;
        border: round $primary;
        width: 100%;
        height: 100%;
    }
    """

    def __init__(self, **kwargs):
        self._clock_kwargs = {
            option: kwargs.pop(option) for option in self.CLOCK_OPTIONS if option in kwargs
        }
        super().__init__(**kwargs)

    def compose(self) -> ComposeResult:
        yield self.MAIN_WIDGET(**self._clock_kwargs)

    def on_mount(self) -> None:
        self.border_title = f"{glyphs.icons['clock']} Clock"
