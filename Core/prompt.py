import os

from config import PROMPT_MAX_LENGTH, PROMPT_SUFFIX


def get_prompt(cwd=None):
    """
    Working directory followed by "% ".
    Long paths are shortened to "/..." plus their last component.
    """
    if cwd is None:
        cwd = os.getcwd()
    if len(cwd) > PROMPT_MAX_LENGTH:
        cwd = "/..." + cwd[cwd.rfind("/"):]
    return cwd + PROMPT_SUFFIX
