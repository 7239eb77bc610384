import os
import stat

from config import DEFAULT_SEARCH_PATH
from Core.finder import search
from Core.output import error, write
from Core.parser import build_args, match_prefix
from Core.redirect import redirect_io

# Return codes of a built-in
BUILTIN_FAILED = 0
BUILTIN_OK = 1
BUILTIN_NO_MATCH = 2
EXIT_SHELL = -1


def builtin_pwd(argument):
    """Print the working directory"""
    try:
        cwd = os.getcwd()
    except OSError as e:
        error(f"getcwd() failed: {e.strerror}\n")
        return BUILTIN_OK
    write(cwd + "\n")
    return BUILTIN_OK


def builtin_cd(argument):
    """Change directory, $HOME when no path is given"""
    path = argument.strip(" ")
    target = path or os.environ.get("HOME")
    if not target:
        return BUILTIN_OK

    try:
        os.chdir(target)
    except OSError:
        if path and os.path.exists(path) and not os.path.isdir(path):
            error(f"{path} not a directory!\n")
        else:
            error("Error changing directory.\n")
    return BUILTIN_OK


def _list_directory(path):
    """Raises OSError when `path` can not be listed"""
    names = sorted(os.listdir(path))
    lines = []
    for name in [".", ".."] + names:
        full_path = os.path.join(path, name)
        try:
            mode = os.stat(full_path).st_mode
        except OSError:
            mode = os.lstat(full_path).st_mode
        lines.append(f"{stat.filemode(mode)} {name}\n")
    return "".join(lines)


def builtin_ls(argument):
    """
    List one directory: the first argument as given, then relative to the
    working directory. Extra arguments are ignored.
    """
    args = build_args(argument)
    path = args[0] if args else ""

    for candidate in (path, os.getcwd() + "/" + path):
        try:
            listing = _list_directory(candidate)
        except OSError:
            continue
        write(listing)
        return BUILTIN_OK

    error(f"Failed to open directory {candidate}\n")
    return BUILTIN_OK


def builtin_ff(argument):
    """ff <filename> [path]"""
    args = build_args(argument)
    if not args:
        error("ff command requires a filename!\n")
        return BUILTIN_FAILED

    path = args[1] if len(args) > 1 else DEFAULT_SEARCH_PATH
    search(args[0], path)
    return BUILTIN_OK


def builtin_exit(argument):
    return EXIT_SHELL


# Tried in this order
BUILTINS = [
    ("pwd", builtin_pwd),
    ("cd", builtin_cd),
    ("ls", builtin_ls),
    ("ff", builtin_ff),
    ("exit", builtin_exit),
]


def execute_builtin(text, saved):
    """
    Run `text` as a built-in if its first word names one.
    Redirections are applied (recorded in `saved`) before the built-in runs.
    Returns: one of BUILTIN_OK, BUILTIN_FAILED, BUILTIN_NO_MATCH, EXIT_SHELL
    """
    for name, func in BUILTINS:
        if not match_prefix(text, name):
            continue
        residual = redirect_io(text, saved)
        return func(residual[len(name):])
    return BUILTIN_NO_MATCH
