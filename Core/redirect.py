import os

from config import REDIRECT_FILE_MODE, TRUNCATE_ON_REDIRECT
from Core.output import STDIN, STDOUT
from Core.parser import REDIRECT_IN, scan_redirections


class RedirectionError(OSError):
    """A redirection target could not be opened"""


class SavedStreams:
    """
    Copies of the shell's own stdin/stdout taken before they are rewired.

    Each slot is filled at most once, with the descriptor that was in place
    before the first rewiring of that stream. restore() puts back whatever
    was saved and must be called by the frame that created the object.
    """

    def __init__(self):
        self.fds = {STDIN: None, STDOUT: None}

    def __contains__(self, fd):
        return self.fds[fd] is not None

    def save(self, fd):
        """Duplicate `fd` unless a copy is already held"""
        if self.fds[fd] is None:
            self.fds[fd] = os.dup(fd)

    def restore_fd(self, fd):
        saved = self.fds[fd]
        if saved is None:
            return
        self.fds[fd] = None
        os.dup2(saved, fd)
        os.close(saved)

    def restore(self):
        for fd in (STDIN, STDOUT):
            self.restore_fd(fd)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.restore()
        return False


def open_target(redirection):
    if redirection.operator == REDIRECT_IN:
        flags = os.O_RDONLY
    else:
        flags = os.O_WRONLY | os.O_CREAT
        if TRUNCATE_ON_REDIRECT:
            flags |= os.O_TRUNC
    try:
        return os.open(redirection.target, flags, REDIRECT_FILE_MODE)
    except OSError as e:
        raise RedirectionError(e.errno, e.strerror, redirection.target) from e


def apply_redirections(redirections, saved):
    """
    Rewire stdin/stdout for each redirection, in order.
    A bare operator puts the original stream back.
    """
    for redirection in redirections:
        fd = STDIN if redirection.operator == REDIRECT_IN else STDOUT
        saved.save(fd)

        if redirection.target is None:
            saved.restore_fd(fd)
            continue

        target_fd = open_target(redirection)
        os.dup2(target_fd, fd)
        os.close(target_fd)


def redirect_io(text, saved):
    """
    Strip the redirection operators from a stage and apply them.
    Returns: the residual stage text
    """
    residual, redirections = scan_redirections(text)
    apply_redirections(redirections, saved)
    return residual
