from Core.editor import LineEditor
from Core.executor import execute_command
from Core.history import HistoryRing
from Core.job_control import poll_jobs, reap_children
from Core.output import write
from Core.prompt import get_prompt


def print_prompt():
    try:
        write(get_prompt())
    except FileNotFoundError:
        # working directory was removed under us
        write("?% ")


def main_loop(terminal):
    """
    Read, execute, remember, until Ctrl-D or `exit`.
    `terminal` must already be in raw mode; its fd is read byte by byte.
    """
    history = HistoryRing()
    editor = LineEditor(history, fd=terminal.fd)

    try:
        while True:
            poll_jobs()
            print_prompt()
            try:
                line = editor.read_line()
            except EOFError:
                break
            except KeyboardInterrupt:
                editor.reset()
                write("\n")
                continue

            try:
                if execute_command(line):
                    break
            except KeyboardInterrupt:
                write("\n")
            history.add(line)
    finally:
        reap_children()
