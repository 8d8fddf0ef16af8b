"""Live loop: poll the snapshot file, feed key presses, redraw.

On a terminal, keys are read one character at a time in cbreak mode on a
thread. Otherwise (pipes, tests) each input line's first character is the
key. The quit key is handled here, everything else goes to the dashboard.
"""

from __future__ import annotations

import logging
import os
import queue
import select
import sys
import threading
import time
from typing import TextIO

try:
    import termios
    import tty
except ImportError:  # Windows
    termios = None
    tty = None

from rich.console import Console
from rich.live import Live

from dugout.config import DashboardConfig
from dugout.core.feed import SnapshotWatcher
from dugout.core.title import TerminalTitleSink
from dugout.dashboard import LiveDashboard

logger = logging.getLogger(__name__)

ESCAPE = "\x1b"
# Long enough for the reader to notice the stop flag and restore the tty
READER_JOIN_TIMEOUT_S = 1.0


def keys_from_chunk(chunk: str) -> list[str]:
    """Split raw terminal input into key presses.

    Arrow and function keys arrive as escape sequences (``"\\x1b[A"``);
    everything from an escape to the end of the chunk is dropped so their
    trailing bytes are never read as keys.
    """
    head, _, _ = chunk.partition(ESCAPE)
    return list(head)


def _read_lines(stream: TextIO, keys: queue.Queue, stop: threading.Event) -> None:
    for line in stream:
        if stop.is_set():
            return
        key = line.strip()[:1]
        if key:
            keys.put(key)


def _read_chars(stream: TextIO, keys: queue.Queue, stop: threading.Event) -> None:
    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    tty.setcbreak(fd)
    try:
        while not stop.is_set():
            ready, _, _ = select.select([fd], [], [], 0.1)
            if not ready:
                continue
            # Unbuffered, so a whole escape sequence lands in one chunk
            chunk = os.read(fd, 64).decode("utf-8", errors="ignore")
            if not chunk:
                return
            for key in keys_from_chunk(chunk):
                keys.put(key)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def start_key_reader(
    stream: TextIO,
    stop: threading.Event,
) -> tuple[queue.Queue, threading.Thread]:
    """Start a daemon thread that pushes key presses onto the returned queue.

    Set ``stop`` and join the returned thread to restore the terminal.
    """
    keys: queue.Queue = queue.Queue()
    use_tty = termios is not None and stream.isatty()
    target = _read_chars if use_tty else _read_lines
    thread = threading.Thread(target=target, args=(stream, keys, stop), daemon=True)
    thread.start()
    return keys, thread


def drain_keys(dashboard: LiveDashboard, keys: queue.Queue, quit_key: str) -> bool:
    """Apply pending key presses. Returns True when the quit key was seen."""
    while True:
        try:
            key = keys.get_nowait()
        except queue.Empty:
            return False
        if key == quit_key:
            return True
        if not dashboard.handle_key(key):
            logger.debug("Unbound key %r", key)


def run_live(
    config: DashboardConfig,
    watcher: SnapshotWatcher,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> None:
    console = console or Console()
    sink = TerminalTitleSink(console, default_title=config.default_title)
    stop = threading.Event()
    keys, reader = start_key_reader(stream or sys.stdin, stop)

    try:
        with LiveDashboard(config, sink) as dashboard:
            snapshot = watcher.poll()
            if snapshot is not None:
                dashboard.recompute(snapshot)
            with Live(dashboard.render(), console=console, refresh_per_second=4, screen=True) as live:
                try:
                    while True:
                        if drain_keys(dashboard, keys, config.keys.quit):
                            break
                        snapshot = watcher.poll()
                        if snapshot is not None:
                            dashboard.recompute(snapshot)
                        live.update(dashboard.render())
                        time.sleep(config.refresh_rate)
                except KeyboardInterrupt:
                    pass
    finally:
        stop.set()
        reader.join(timeout=READER_JOIN_TIMEOUT_S)
