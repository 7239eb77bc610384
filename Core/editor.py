import codecs
import os

from config import (
    ESCAPE_SEQUENCE_LENGTH,
    KEY_BACKSPACE,
    KEY_DELETE,
    KEY_DOWN,
    KEY_EOT,
    KEY_ESCAPE,
    KEY_NEWLINE,
    KEY_UP,
)
from Core.history import HistoryRing
from Core.output import STDIN, write

ERASE = b"\b \b"
BELL = b"\a"

IDLE = "idle"
ESCAPE = "escape"


class LineEditor:
    """
    Builds a command line from raw terminal bytes.

    States:
      IDLE    normal typing
      ESCAPE  inside an escape sequence, `pending` bytes still to swallow.
              Up/down payload bytes recall history and end the sequence.

    The escape handling is a fixed-length heuristic, not a terminal
    capability parser: any sequence longer than ESCAPE_SEQUENCE_LENGTH
    leaks its tail into the line.
    0x7E is taken as delete, the tail of the Delete key sequence, so a
    literal "~" can not be typed.
    """

    def __init__(self, history=None, fd=STDIN, output=None):
        self.history = history if history is not None else HistoryRing()
        self.fd = fd
        self.output = output or write
        self.buffer = ""
        self.state = IDLE
        self.pending = 0
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def reset(self):
        self.buffer = ""
        self.state = IDLE
        self.pending = 0
        self._decoder.reset()

    def read_line(self):
        """
        Block until a full line is typed.
        Raises EOFError on Ctrl-D or when the input stream closes.
        """
        while True:
            data = os.read(self.fd, 1)
            if not data:
                raise EOFError
            line = self.feed(data[0])
            if line is not None:
                return line

    def feed(self, byte):
        """
        Process one input byte.
        Returns the completed line on newline, otherwise None.
        """
        if self.state == ESCAPE:
            return self._feed_escape(byte)

        if byte == KEY_EOT:
            self.output(bytes([byte]))
            raise EOFError

        if byte == KEY_NEWLINE:
            self.output(bytes([byte]))
            line = self.buffer
            self.reset()
            return line

        if byte in (KEY_BACKSPACE, KEY_DELETE):
            self._erase_last()
        elif byte == KEY_ESCAPE:
            self.state = ESCAPE
            self.pending = ESCAPE_SEQUENCE_LENGTH - 1
        else:
            text = self._decoder.decode(bytes([byte]))
            if text:
                self.buffer += text
                self.output(text)
        return None

    def _feed_escape(self, byte):
        self.pending -= 1
        if byte in (KEY_UP, KEY_DOWN):
            self.pending = 0
            self.recall(older=(byte == KEY_UP))
        if self.pending <= 0:
            self.state = IDLE
        return None

    def _erase_last(self):
        if not self.buffer:
            self.output(BELL)
            return
        self.buffer = self.buffer[:-1]
        self.output(ERASE)

    def recall(self, older=True):
        """Replace the displayed line with the next older/newer history entry"""
        entry = self.history.older() if older else self.history.newer()
        if entry is None:
            self.output(BELL)
            return

        if self.buffer:
            self.output(ERASE * len(self.buffer))
        self.buffer = entry
        if entry:
            self.output(entry)
