"""Tests for command line scanning."""

from Core.parser import (
    Redirection,
    build_args,
    match_prefix,
    scan_redirections,
    split_background,
    split_pipeline,
)


class TestSplitBackground:

    def test_trailing_ampersand(self):
        assert split_background("sleep 1 &") == ("sleep 1 ", True)

    def test_trailing_spaces_after_ampersand(self):
        assert split_background("sleep 1 &   ") == ("sleep 1    ", True)

    def test_ampersand_followed_by_text_is_not_background(self):
        assert split_background("a & b") == ("a & b", False)

    def test_no_ampersand(self):
        assert split_background("ls") == ("ls", False)

    def test_pipeline_is_backgrounded_as_a_whole(self):
        line, background = split_background("ls | wc -l&")
        assert background
        assert line == "ls | wc -l"


class TestSplitPipeline:

    def test_single_stage(self):
        assert split_pipeline("ls -l") == ["ls -l"]

    def test_stages_keep_left_to_right_order(self):
        assert split_pipeline("a | b|c") == ["a ", " b", "c"]

    def test_empty_stages_are_kept(self):
        assert split_pipeline("| wc") == ["", " wc"]


class TestScanRedirections:

    def test_input_and_output(self):
        residual, redirections = scan_redirections("cat < in.txt > out.txt")
        assert residual == "cat  "
        assert redirections == [
            Redirection("<", "in.txt"),
            Redirection(">", "out.txt"),
        ]

    def test_inputs_come_before_outputs(self):
        residual, redirections = scan_redirections("cat>out<in")
        assert residual == "cat"
        assert redirections == [Redirection("<", "in"), Redirection(">", "out")]

    def test_spaces_between_operator_and_target(self):
        residual, redirections = scan_redirections("ls >      file1")
        assert residual == "ls "
        assert redirections == [Redirection(">", "file1")]

    def test_multiple_outputs_in_order(self):
        _, redirections = scan_redirections("ls > a > b")
        assert [r.target for r in redirections] == ["a", "b"]

    def test_bare_trailing_operator(self):
        residual, redirections = scan_redirections("ls >")
        assert residual == "ls "
        assert redirections == [Redirection(">", None)]

    def test_no_operators(self):
        assert scan_redirections("echo hi") == ("echo hi", [])


class TestBuildArgs:

    def test_splits_on_spaces(self):
        assert build_args("  ls   -l  /tmp ") == ["ls", "-l", "/tmp"]

    def test_quotes_are_not_interpreted(self):
        assert build_args("echo 'a b'") == ["echo", "'a", "b'"]

    def test_hash_is_not_a_comment(self):
        assert build_args("echo #x") == ["echo", "#x"]

    def test_empty(self):
        assert build_args("   ") == []


class TestMatchPrefix:

    def test_exact(self):
        assert match_prefix("ls", "ls")

    def test_followed_by_space(self):
        assert match_prefix("ls /tmp", "ls")

    def test_longer_word_does_not_match(self):
        assert not match_prefix("lss", "ls")

    def test_case_sensitive(self):
        assert not match_prefix("LS", "ls")
