"""A small terminal view showing the file name and the current time."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, List, Optional, Union

ESCAPE = 27
NO_KEY = -1
DEFAULT_TICK_RATE = timedelta(milliseconds=333)

_MARGIN = 2
_TITLE = "Messages"


@dataclass
class App:
    """State of the terminal view."""

    file: Union[str, Path]

    def __post_init__(self) -> None:
        self.file = Path(self.file)

    def file_name(self) -> str:
        """The file path as displayed."""
        return str(self.file)

    def handle_key(self, key: int) -> bool:
        """Return whether the view keeps running after ``key``."""
        return key != ESCAPE

    def status_line(self, now: datetime) -> str:
        """The file name followed by the time of day."""
        return f"{self.file_name()} {now:%H:%M:%S}"

    def run(self, screen: Any, tick_rate: timedelta = DEFAULT_TICK_RATE) -> None:
        """Redraw on every tick or key press until Escape is pressed."""
        last_tick = datetime.now()
        while True:
            render(screen, self)
            remaining = max(tick_rate - (datetime.now() - last_tick), timedelta(0))
            screen.timeout(int(remaining / timedelta(milliseconds=1)))
            key = screen.getch()
            if key != NO_KEY and not self.handle_key(key):
                return
            if datetime.now() - last_tick >= tick_rate:
                last_tick = datetime.now()


def _frame(width: int) -> List[str]:
    span = width - 2
    title_bar = (_TITLE + "─" * span)[:span]
    return ["┌" + title_bar + "┐", "│" + " " * span + "│", "└" + "─" * span + "┘"]


def render(screen: Any, app: App) -> None:
    """Draw the status line and the titled message frame."""
    height, width = screen.getmaxyx()
    screen.erase()
    inner_width = width - 2 * _MARGIN
    rows = height - 2 * _MARGIN
    if inner_width > 0 and rows >= 1:
        screen.addstr(_MARGIN, _MARGIN, app.status_line(datetime.now())[:inner_width])
    if inner_width >= 2 and rows >= 4:
        for row, line in enumerate(_frame(inner_width), start=_MARGIN + 1):
            screen.addstr(row, _MARGIN, line)
    screen.refresh()


def main(argv: Optional[List[str]] = None) -> int:
    """Show the view for the file named on the command line."""
    parser = argparse.ArgumentParser(
        prog="mp4scan-tui", description="Show an MP4 file in a terminal view."
    )
    parser.add_argument("-f", "--file", required=True, help="MP4 file to show")
    args = parser.parse_args(argv)
    app = App(args.file)

    import curses

    def session(screen: Any) -> None:
        curses.mousemask(curses.ALL_MOUSE_EVENTS)
        app.run(screen)

    curses.wrapper(session)
    return 0