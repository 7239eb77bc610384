import shlex
from collections import namedtuple

PIPE = "|"
BACKGROUND = "&"
REDIRECT_IN = "<"
REDIRECT_OUT = ">"
OPERATORS = REDIRECT_IN + REDIRECT_OUT

# target is None for a bare operator ("restore the original stream")
Redirection = namedtuple("Redirection", ["operator", "target"])


def split_background(line):
    """
    Detect a trailing background marker.
    Only the first '&' counts, and only when nothing but spaces follows it.
    Returns: (line without the marker, background: bool)
    """
    pos = line.find(BACKGROUND)
    if pos == -1 or line[pos + 1:].strip(" "):
        return line, False
    return line[:pos] + line[pos + 1:], True


def split_pipeline(line):
    """
    Split a command line into pipeline stages, left to right.
    Empty stages are kept, they run as no-ops.
    Returns: list of stage strings (always at least one)
    """
    return line.split(PIPE)


def scan_redirections(text):
    """
    Pull '<' and '>' operators and their targets out of a stage.

    A target is the run of characters after the operator (spaces skipped)
    up to the next space or operator. An operator with no target is bare.

    Returns: (residual text, list of Redirection)
        all input redirections come first, then all output ones,
        each group in left to right order.
    """
    inputs, outputs, kept = [], [], []
    pos, end = 0, len(text)

    while pos < end:
        char = text[pos]
        if char not in OPERATORS:
            kept.append(char)
            pos += 1
            continue

        start = pos + 1
        while start < end and text[start] == " ":
            start += 1
        stop = start
        while stop < end and text[stop] != " " and text[stop] not in OPERATORS:
            stop += 1

        target = text[start:stop] or None
        group = inputs if char == REDIRECT_IN else outputs
        group.append(Redirection(char, target))
        pos = stop if target else pos + 1

    return "".join(kept), inputs + outputs


def build_args(text):
    """
    Split a stage on whitespace into an argument vector.
    No quoting, escapes or comments.
    """
    lex = shlex.shlex(text, posix=True)
    lex.whitespace_split = True
    lex.commenters = ""
    lex.quotes = ""
    lex.escape = ""
    return list(lex)


def match_prefix(text, name):
    """
    True when `text` invokes `name`: either exactly `name`
    or `name` followed by a space ("ls" matches, "lss" does not).
    """
    if not text.startswith(name):
        return False
    return len(text) == len(name) or text[len(name)] == " "
