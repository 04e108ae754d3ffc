"""
KeyReader producer thread for terminal keyboard input.

This module provides blocking keyboard reading on a dedicated thread that
forwards every key press, in order, to the dashboard's event channel.

- Sets cbreak mode once at startup, restores it at shutdown
- Reads raw bytes from the file descriptor (no Python-level buffering, so
  select() sees exactly what is pending)
- Uses select() with a timeout so the thread notices stop() quickly
- Decodes escape sequences for arrows, page keys, home and end into names
- Stops on its own when the input is closed (EOF)

Keys are plain strings: printable characters stand for themselves, special
keys use the names defined on Key.
"""

import codecs
import os
import re
import select
import termios
import threading
import tty
from collections.abc import Callable


class Key:
    """Names of special keys produced by parse_keys()."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "pageup"
    PAGE_DOWN = "pagedown"
    HOME = "home"
    END = "end"
    ENTER = "enter"
    ESC = "esc"
    BACKSPACE = "backspace"
    TAB = "tab"


ESCAPE_SEQUENCES = {
    "\x1b[A": Key.UP,
    "\x1b[B": Key.DOWN,
    "\x1b[C": Key.RIGHT,
    "\x1b[D": Key.LEFT,
    "\x1bOA": Key.UP,
    "\x1bOB": Key.DOWN,
    "\x1bOC": Key.RIGHT,
    "\x1bOD": Key.LEFT,
    "\x1b[5~": Key.PAGE_UP,
    "\x1b[6~": Key.PAGE_DOWN,
    "\x1b[H": Key.HOME,
    "\x1b[F": Key.END,
    "\x1bOH": Key.HOME,
    "\x1bOF": Key.END,
    "\x1b[1~": Key.HOME,
    "\x1b[4~": Key.END,
    "\x1b[7~": Key.HOME,
    "\x1b[8~": Key.END,
}

SINGLE_KEYS = {
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\t": Key.TAB,
    "\x7f": Key.BACKSPACE,
}

# CSI: ESC [ params final-byte, SS3: ESC O final-byte
_SEQUENCE_RE = re.compile(r"\x1b(?:\[[0-9;]*[@-~]|O[@-~])")
_PENDING_RE = re.compile(r"\x1b(?:\[[0-9;]*|O)?$")


def parse_keys(text: str) -> list[str]:
    """
    Split raw terminal input into key names.

    Known escape sequences become Key names, unknown complete sequences
    are passed through verbatim, a lone ESC becomes Key.ESC.

    Args:
        text: Decoded input as read from the terminal

    Returns:
        Keys in input order
    """
    keys: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == "\x1b":
            match = _SEQUENCE_RE.match(text, i)
            if match:
                sequence = match.group(0)
                keys.append(ESCAPE_SEQUENCES.get(sequence, sequence))
                i = match.end()
                continue
            keys.append(Key.ESC)
        else:
            keys.append(SINGLE_KEYS.get(char, char))
        i += 1
    return keys


class KeyReader:
    """
    Keyboard producer thread.

    Example:
        reader = KeyReader(on_key=lambda key: events.put(Input(key)))
        reader.start()
        # Later:
        reader.stop()
    """

    def __init__(
        self,
        on_key: Callable[[str], None],
        fd: int | None = None,
        poll_timeout: float = 0.3,
    ) -> None:
        """
        Initialize key reader.

        Args:
            on_key: Callback invoked with each key, on the reader thread
            fd: File descriptor to read, defaults to stdin
            poll_timeout: Seconds between checks of the stop flag
        """
        self._on_key = on_key
        self._fd = fd if fd is not None else 0
        self._poll_timeout = poll_timeout
        self._shutdown = threading.Event()
        self._thread: threading.Thread | None = None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def start(self) -> None:
        self._thread = threading.Thread(target=self.run, name="key-reader", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = 1.0) -> None:
        """Signal the thread to stop and wait for it to restore the terminal."""
        self._shutdown.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)

    def _ready(self, timeout: float) -> bool:
        return bool(select.select([self._fd], [], [], timeout)[0])

    def _read_text(self) -> str | None:
        """
        Read whatever input is pending.

        Waits briefly for the rest of an escape sequence that was split
        across reads.

        Returns:
            Decoded text, or None on EOF
        """
        data = os.read(self._fd, 1024)
        if not data:
            return None
        text = self._decoder.decode(data)
        while _PENDING_RE.search(text) and self._ready(0.05):
            more = os.read(self._fd, 1024)
            if not more:
                break
            text += self._decoder.decode(more)
        return text

    def run(self) -> None:
        """
        Main reader loop.

        Sets cbreak mode when reading from a terminal and restores the
        previous settings on exit.
        """
        old_settings = None
        if os.isatty(self._fd):
            old_settings = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        try:
            while not self._shutdown.is_set():
                if not self._ready(self._poll_timeout):
                    continue
                text = self._read_text()
                if text is None:
                    break  # input closed
                for key in parse_keys(text):
                    self._on_key(key)
        finally:
            if old_settings is not None:
                termios.tcsetattr(self._fd, termios.TCSADRAIN, old_settings)
