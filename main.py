import sys

from Core.output import error
from Core.shell import main_loop
from Core.terminal import NotATerminalError, RawTerminal


def main():
    try:
        with RawTerminal() as terminal:
            main_loop(terminal)
    except NotATerminalError as e:
        error(f"{e}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
