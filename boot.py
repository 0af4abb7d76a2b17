"""
digiclock v0.1
A digital clock for the terminal
Built with Textual v6.5.0

Shows the local time as a 12-hour "H:MM:SS AM" string, refreshed every second.

Keys:
  p  toggle the zero-padded hour ("1:05:09 PM" / "01:05:09 PM")
  s  stop / start the clock (unmounts and re-mounts it)
  q  quit

Usage:
  python boot.py [compatible|standard|nerdfont]

Debug output (print) goes to the console server:
  python -m digiclock.display.console
"""
from __future__ import annotations

import sys
from datetime import datetime

import digiclock.display.glyphs as glyphs
from digiclock.core.events import TimeChanged
from digiclock.display.clock import ClockContainer, DigitalClock
from digiclock.display.console import redirect_stdout, restore_stdout
from textual import log, on
from textual.app import App, ComposeResult
from textual.widgets import Label


class DigitalClockApp(App):
    """
    Hosts one ClockContainer. Stopping the clock removes the container, which
    stops its timer; starting it again mounts a fresh one.
    """
    CSS = """
    Screen {
        align: center middle;
    }
    #clock-stopped {
        display: none;
        width: 100%;
        content-align: center middle;
    }
    """
    BINDINGS = [
        ("p", "toggle_pad_hour", "Toggle Hour Padding"),
        ("s", "toggle_clock", "Stop/Start Clock"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, *args, **kwargs):
        self.use_console: bool = kwargs.pop("use_console", False)
        self._clock_kwargs = {
            option: kwargs.pop(option)
            for option in ClockContainer.CLOCK_OPTIONS
            if option in kwargs
        }
        super().__init__(*args, **kwargs)
        self._saved_streams = None
        self.last_instant: datetime | None = None

    def compose(self) -> ComposeResult:
        yield ClockContainer(id="clock-container", **self._clock_kwargs)
        yield Label(f"{glyphs.icons['stopped']} Clock stopped", id="clock-stopped")

    def on_mount(self) -> None:
        if self.use_console:
            self._saved_streams = redirect_stdout()

    def on_unmount(self) -> None:
        if self._saved_streams is not None:
            restore_stdout(self._saved_streams)
            self._saved_streams = None

    @on(TimeChanged)
    def record_instant(self, message: TimeChanged) -> None:
        # ticks still queued from a clock that has since stopped
        if message.source.is_active:
            self.last_instant = message.instant

    @property
    def clock_running(self) -> bool:
        return bool(self.query(ClockContainer))

    def action_toggle_pad_hour(self) -> None:
        """Flips hour padding on the live clock and for clocks mounted later."""
        pad_hour = not self._clock_kwargs.get("pad_hour", DigitalClock.PAD_HOUR)
        self._clock_kwargs["pad_hour"] = pad_hour
        for clock in self.query(DigitalClock):
            clock.pad_hour = pad_hour
        print(f"App action: hour padding {'on' if pad_hour else 'off'}.")

    async def action_toggle_clock(self) -> None:
        stopped_label = self.query_one("#clock-stopped", Label)
        if self.clock_running:
            print("App action: stopping clock.")
            await self.query(ClockContainer).remove()
            self.last_instant = None
            stopped_label.display = True
        else:
            print("App action: starting clock.")
            stopped_label.display = False
            await self.mount(
                ClockContainer(id="clock-container", **self._clock_kwargs),
                before=stopped_label,
            )
        log(f"Clock running: {self.clock_running}")


def main() -> None:
    glyphs.init(sys.argv[1] if len(sys.argv) > 1 else "compatible")
    DigitalClockApp(use_console=True).run()


if __name__ == "__main__":
    main()
