"""
CLI tests — argument handling, exit codes and the printed group format.
"""
import sys
from unittest import mock

import pytest

from dupescan.cli import CLIApplication, main
from dupescan.core.models import DuplicateGroup, File


def run_cli(argv):
    with mock.patch.object(sys, "argv", ["dupescan"] + argv):
        main()


class TestArgumentParsing:
    def test_defaults(self):
        args = CLIApplication().parse_args(["/tmp"])
        assert args.directory == "/tmp"
        assert args.precision == 2
        assert args.size is None
        assert args.regex is None
        assert args.recurse is False
        assert args.invert_regex is False
        assert args.verbose is False

    def test_short_and_long_flags(self):
        long_args = CLIApplication().parse_args(
            ["--size", "+200M", "--recurse", "--regex", "x.*", "--invert-regex",
             "--precision", "1", "--verbose", "/data"])
        short_args = CLIApplication().parse_args(
            ["-s", "+200M", "-r", "-R", "x.*", "-i", "-p", "1", "-v", "/data"])
        assert vars(long_args) == vars(short_args)
        assert long_args.size == "+200M"
        assert long_args.precision == 1

    def test_negative_size_spec(self):
        assert CLIApplication().parse_args(["-s", "-500", "/data"]).size == "-500"
        assert CLIApplication().parse_args(["--size=-1G", "/data"]).size == "-1G"

    def test_help_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            CLIApplication().parse_args(["--help"])
        assert exc_info.value.code == 0
        assert "find duplicate files" in capsys.readouterr().out

    def test_help_lists_precision_levels(self, capsys):
        with pytest.raises(SystemExit):
            CLIApplication().parse_args(["--help"])
        out = capsys.readouterr().out
        assert "0 : Consider equal length files identical" in out
        assert "2 : Consider byte-by-byte equal files identical (default)" in out

    @pytest.mark.parametrize("argv", [
        [],
        ["/a", "/b"],
        ["--precision", "3", "/a"],
        ["--precision", "two", "/a"],
        ["--unknown", "/a"],
        ["--size"],
    ])
    def test_argument_errors_exit_one(self, argv):
        with pytest.raises(SystemExit) as exc_info:
            CLIApplication().parse_args(argv)
        assert exc_info.value.code == 1

    def test_parse_error_message(self, capsys):
        with pytest.raises(SystemExit):
            CLIApplication().parse_args(["--precision", "5", "/a"])
        err = capsys.readouterr().err
        assert "The following errors occurred while parsing your command" in err
        assert "usage: dupescan" in err


class TestRun:
    def test_hello_world_output(self, hello_world_dir, capsys):
        run_cli([str(hello_world_dir)])
        captured = capsys.readouterr()

        expected = f"{hello_world_dir / 'a.txt'}\n{hello_world_dir / 'b.txt'}\n\n"
        assert captured.out == expected
        assert "done. (3 files to examine)" in captured.err

    def test_paths_printed_as_directory_was_given(self, hello_world_dir, capsys, monkeypatch):
        monkeypatch.chdir(hello_world_dir.parent)
        run_cli([hello_world_dir.name])
        out = capsys.readouterr().out
        assert out == f"{hello_world_dir.name}/a.txt\n{hello_world_dir.name}/b.txt\n\n"

    def test_invert_without_regex_scans_everything(self, hello_world_dir, capsys):
        run_cli(["--invert-regex", str(hello_world_dir)])
        captured = capsys.readouterr()
        assert captured.out == f"{hello_world_dir / 'a.txt'}\n{hello_world_dir / 'b.txt'}\n\n"
        assert "done. (3 files to examine)" in captured.err

    def test_size_filter_empty_output(self, hello_world_dir, capsys):
        run_cli(["--size", "+10", str(hello_world_dir)])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "(0 files to examine)" in captured.err

    def test_inverted_regex(self, test_files, temp_dir, capsys):
        run_cli(["-r", "-R", r".*\.txt", "-i", str(temp_dir)])
        out = capsys.readouterr().out
        assert out == f"{test_files['dup2_a']}\n{test_files['dup2_b']}\n\n"

    def test_length_only_precision(self, hello_world_dir, capsys):
        run_cli(["-p", "0", str(hello_world_dir)])
        lines = capsys.readouterr().out.splitlines()
        assert lines == [str(hello_world_dir / n) for n in ("a.txt", "b.txt", "c.txt")] + [""]

    def test_multiple_groups_separated_by_blank_lines(self, test_files, temp_dir, capsys):
        run_cli(["--recurse", str(temp_dir)])
        blocks = capsys.readouterr().out.split("\n\n")
        assert blocks[-1] == ""
        assert [len(b.splitlines()) for b in blocks[:-1]] == [3, 2]

    def test_verbose_prints_statistics(self, hello_world_dir, capsys):
        run_cli(["-v", str(hello_world_dir)])
        captured = capsys.readouterr()
        assert "Scan Statistics" in captured.err
        assert "Comparisons: 2" in captured.err
        assert captured.out.count("\n") == 3

    @pytest.mark.parametrize("argv, message", [
        (["--size", "huge"], "Invalid size specification"),
        (["--regex", "(["], "Invalid regular expression"),
    ])
    def test_parameter_errors_exit_one(self, hello_world_dir, capsys, argv, message):
        with pytest.raises(SystemExit) as exc_info:
            run_cli(argv + [str(hello_world_dir)])
        assert exc_info.value.code == 1
        assert message in capsys.readouterr().err

    def test_missing_directory_exits_one(self, temp_dir, capsys):
        with pytest.raises(SystemExit) as exc_info:
            run_cli([str(temp_dir / "missing")])
        assert exc_info.value.code == 1
        assert "Directory not found" in capsys.readouterr().err

    def test_io_error_during_comparison_exits_one(self, hello_world_dir, capsys):
        with mock.patch("dupescan.core.byte_compare.open", create=True,
                        side_effect=PermissionError(13, "denied", "x")):
            with pytest.raises(SystemExit) as exc_info:
                run_cli([str(hello_world_dir)])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Scan failed" in err

    def test_keyboard_interrupt_exits_130(self, hello_world_dir):
        with mock.patch.object(CLIApplication, "run", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                run_cli([str(hello_world_dir)])
        assert exc_info.value.code == 130


class TestFormatGroup:
    def test_anchor_then_duplicates_then_blank_line(self):
        group = DuplicateGroup(files=[File(path="/x/a"), File(path="/y/b"), File(path="/z/c")])
        assert CLIApplication.format_group(group) == "/x/a\n/y/b\n/z/c\n\n"
