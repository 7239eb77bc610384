"""Tests for prompt rendering."""

import os

from Core.prompt import get_prompt


class TestPrompt:

    def test_short_path_is_shown_as_is(self):
        assert get_prompt("/tmp") == "/tmp% "

    def test_root(self):
        assert get_prompt("/") == "/% "

    def test_sixteen_characters_are_not_shortened(self):
        cwd = "/home/user/abcde"
        assert len(cwd) == 16
        assert get_prompt(cwd) == cwd + "% "

    def test_long_path_keeps_last_component(self):
        assert get_prompt("/home/user/projects/ashell") == "/.../ashell% "

    def test_defaults_to_working_directory(self, workdir):
        cwd = os.getcwd()
        expected = cwd if len(cwd) <= 16 else "/..." + cwd[cwd.rfind("/"):]
        assert get_prompt() == expected + "% "
