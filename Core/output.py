import os

STDIN = 0
STDOUT = 1
STDERR = 2


def write(text, fd=STDOUT):
    """
    Write text straight to a file descriptor.
    Bypasses sys.stdout so nothing stays buffered across fork() or dup2().
    """
    if isinstance(text, str):
        text = text.encode(errors="surrogateescape")
    while text:
        written = os.write(fd, text)
        text = text[written:]


def error(text):
    """Write a diagnostic to stderr"""
    write(text, STDERR)
