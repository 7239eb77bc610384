import os
import signal
import sys

from Core.output import error


def fork():
    """os.fork() with Python's own stdio buffers flushed first"""
    sys.stdout.flush()
    sys.stderr.flush()
    return os.fork()


def run_child(func, *args):
    """
    Body of a forked child: run func(*args) and exit.
    Never returns, so the child can not fall back into the caller's loop
    or run the parent's cleanup (terminal restore, test runner, ...).
    """
    status = 0
    try:
        func(*args)
    except SystemExit as e:
        status = e.code if isinstance(e.code, int) else 1
    except BrokenPipeError:
        status = 1
    except BaseException as e:
        error(f"{e}\n")
        status = 1
    finally:
        os._exit(status)


def spawn(func, *args):
    """Fork a child running func(*args). Returns the child's pid."""
    pid = fork()
    if pid == 0:
        run_child(func, *args)
    return pid


def wait_for(pid):
    """Block until `pid` exits. Its status is not inspected."""
    try:
        os.waitpid(pid, 0)
    except ChildProcessError:
        pass


def exec_program(args):
    """
    Replace the current (child) process with `args[0]`, searched on PATH.
    Python ignores SIGPIPE, the program gets the default action back.
    """
    signal.signal(signal.SIGPIPE, signal.SIG_DFL)
    os.execvp(args[0], args)
