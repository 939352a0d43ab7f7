"""Command parsing and the stdin reader thread for the development CLI."""

from __future__ import annotations

import logging
import queue
import sys
import threading
from dataclasses import dataclass
from typing import List, Optional, TextIO

logger = logging.getLogger(__name__)


@dataclass
class CLICommand:
    """Result of parsing a command string."""
    name: str
    args: List[str]


_cli_command_queue: queue.Queue[CLICommand] = queue.Queue()
_cli_thread_stop_event = threading.Event()


def parse_command(text: str) -> Optional[CLICommand]:
    """Return a :class:`CLICommand` from ``text`` if it starts with ``/``."""
    text = text.strip()
    if not text.startswith("/"):
        return None
    parts = text[1:].split()
    if not parts:
        return None
    return CLICommand(name=parts[0].lower(), args=parts[1:])


def _cli_input_thread_func(stream: TextIO) -> None:
    """Read lines from ``stream`` and queue the parsed commands."""
    logger.info("CLI input thread started. Type commands prefixed with '/' and press Enter.")
    while not _cli_thread_stop_event.is_set():
        line = stream.readline()
        if not line:  # EOF
            break
        parsed = parse_command(line)
        if parsed:
            _cli_command_queue.put(parsed)
        elif line.strip():
            logger.info("Commands start with '/'. Try /help.")
    logger.info("CLI input thread stopped.")


def start_cli_thread(stream: TextIO | None = None) -> threading.Thread:
    """Start the daemon thread reading commands from ``stream`` (stdin)."""
    _cli_thread_stop_event.clear()
    thread = threading.Thread(
        target=_cli_input_thread_func,
        args=(stream if stream is not None else sys.stdin,),
        daemon=True,
        name="CLIInputThread",
    )
    thread.start()
    return thread


def stop_cli_thread() -> None:
    """Signal the reader thread to stop after its current line.

    A thread blocked on ``readline`` only notices once input arrives; being a
    daemon it will not keep the process alive.
    """
    _cli_thread_stop_event.set()


def poll_command() -> Optional[CLICommand]:
    """Return a command from the internal queue if available, else ``None``."""
    try:
        return _cli_command_queue.get_nowait()
    except queue.Empty:
        return None


__all__ = ["CLICommand", "parse_command", "poll_command", "start_cli_thread", "stop_cli_thread"]
