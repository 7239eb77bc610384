import os

from Core.builtin import BUILTIN_FAILED, BUILTIN_NO_MATCH, EXIT_SHELL, execute_builtin
from Core.job_control import add_background_job
from Core.output import STDIN, STDOUT, error
from Core.parser import build_args, split_background, split_pipeline
from Core.process import exec_program, fork, run_child, spawn, wait_for
from Core.redirect import RedirectionError, SavedStreams, redirect_io


def _exec_child(args, command):
    try:
        exec_program(args)
    except (OSError, ValueError):
        error(f"Failed to execute {command}\n")


def run_external(args, command):
    """
    Run a program in a forked child and wait for it.
    A failed exec is reported by the child, which then exits normally.
    """
    pid = fork()
    if pid == 0:
        run_child(_exec_child, args, command)
    wait_for(pid)


def run_stage(text, saved):
    """
    Execute a single pipeline stage in the current process.
    Built-ins run here directly, anything else through run_external().
    Returns: True if the shell should exit
    """
    text = text.lstrip(" ")
    if not text.strip():
        return False

    try:
        status = execute_builtin(text, saved)
        if status == BUILTIN_NO_MATCH:
            command = redirect_io(text, saved)
            args = build_args(command)
            if args:
                run_external(args, command.strip())
    except RedirectionError as e:
        error(f'Failed to open file "{e.filename}"\n')
        return False
    except OSError as e:
        error(f"Failed to execute {text}: {e.strerror}\n")
        return False
    except ValueError:
        # embedded NUL in a path or argument
        error(f"Failed to execute {text}\n")
        return False

    if status == BUILTIN_FAILED:
        error(f"Failed to execute {text}\n")
    return status == EXIT_SHELL


def _run_piped_stage(text, read_fd, write_fd):
    if read_fd is not None:
        os.dup2(read_fd, STDIN)
        os.close(read_fd)
    os.dup2(write_fd, STDOUT)
    os.close(write_fd)
    run_stage(text, SavedStreams())


def execute_pipeline(stages):
    """
    Execute stages connected by pipes.

    Every stage but the last runs in its own forked child, writing into a
    pipe read by the next stage. The last stage runs in this process with
    stdin bound to the final pipe. All stages are started before any is
    waited for; children are then waited for left to right after the
    shell's own streams are restored.
    Returns: True if the shell should exit
    """
    saved = SavedStreams()
    children = []
    read_fd = None

    try:
        for stage in stages[:-1]:
            read_end, write_end = os.pipe()
            pid = fork()
            if pid == 0:
                os.close(read_end)
                run_child(_run_piped_stage, stage, read_fd, write_end)

            children.append(pid)
            os.close(write_end)
            if read_fd is not None:
                os.close(read_fd)
            read_fd = read_end

        if read_fd is not None:
            saved.save(STDIN)
            os.dup2(read_fd, STDIN)
            os.close(read_fd)
            read_fd = None

        return run_stage(stages[-1], saved)
    finally:
        if read_fd is not None:
            os.close(read_fd)
        saved.restore()
        for pid in children:
            wait_for(pid)


def execute_command(line):
    """
    Execute one full command line.
    A trailing '&' forks the whole line off without waiting for it.
    Returns: True if the shell should exit
    """
    line, background = split_background(line)
    if background:
        pid = spawn(execute_command, line)
        add_background_job(pid, line.strip())
        return False

    return execute_pipeline(split_pipeline(line))
