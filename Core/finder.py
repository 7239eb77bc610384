import os
import stat

from Core.output import error, write
from Core.process import spawn, wait_for


class SearchAborted(Exception):
    """stat() failed somewhere below the search root"""

    def __init__(self, path):
        super().__init__(path)
        self.path = path


def find_file(name, path):
    """
    Print every non-directory entry called `name` under `path`.

    Each subdirectory is searched in its own forked child, and that child
    is waited for before the next entry is looked at.
    """
    try:
        entries = os.listdir(path)
    except OSError:
        error(f'Failed to open directory "{path}"\n')
        return

    for entry in entries:
        full_path = path + "/" + entry
        try:
            st = os.stat(full_path)
        except OSError as e:
            raise SearchAborted(full_path) from e

        if stat.S_ISDIR(st.st_mode):
            wait_for(spawn(search_branch, name, full_path))
        elif entry == name:
            write(full_path + "\n")


def search_branch(name, path):
    """Child side of find_file(): a stat failure ends this branch with status 1"""
    try:
        find_file(name, path)
    except SearchAborted:
        error("stat error\n")
        raise SystemExit(1)


def search(name, path):
    """Entry point used by the ff built-in, runs in the calling process"""
    try:
        find_file(name, path)
    except SearchAborted:
        error("stat error\n")
