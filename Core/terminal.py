import os
import sys
import termios


class NotATerminalError(Exception):
    """stdin is not an interactive terminal"""


class RawTerminal:
    """
    Owns the terminal attributes of the shell.

    Usage:
        with RawTerminal() as terminal:
            ...
    The attributes captured on entry are put back exactly once, on whatever
    path leaves the block. Forked children never restore them.
    """

    def __init__(self, fd=None):
        self.fd = sys.stdin.fileno() if fd is None else fd
        self._saved = None
        self._owner = None

    @property
    def is_raw(self):
        return self._saved is not None

    def enter_raw_mode(self):
        """Character-at-a-time input, no echo, blocking reads of 1 byte"""
        if not os.isatty(self.fd):
            raise NotATerminalError("Not a terminal.")

        self._saved = termios.tcgetattr(self.fd)
        self._owner = os.getpid()

        attrs = termios.tcgetattr(self.fd)
        attrs[3] = attrs[3] & ~(termios.ICANON | termios.ECHO)
        attrs[6][termios.VMIN] = 1
        attrs[6][termios.VTIME] = 0
        termios.tcsetattr(self.fd, termios.TCSAFLUSH, attrs)

    def restore(self):
        """Reapply the attributes saved by enter_raw_mode()"""
        if self._saved is None or self._owner != os.getpid():
            return
        saved, self._saved = self._saved, None
        termios.tcsetattr(self.fd, termios.TCSANOW, saved)

    def __enter__(self):
        self.enter_raw_mode()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.restore()
        return False
