"""End-to-end tests for the tagsearch command line."""

import pytest
from pathlib import Path

from tagsearch import __version__
from tagsearch.cli.main import create_parser, main, resolve_command
from tagsearch.core.config import Config


def run_cli(argv: list[str]) -> int:
    """Run main() and return its exit code."""
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


@pytest.fixture
def in_notes(notes_dir: Path, monkeypatch) -> Path:
    """Run commands from inside notes_dir."""
    monkeypatch.chdir(notes_dir)
    return notes_dir


class TestFilesCommand:
    """Tests for selecting files by keyword."""

    def test_default_command_is_files(self, in_notes, capsys):
        """Keywords without a command should list matching files."""
        assert run_cli(["alpha", "beta"]) == 0

        assert capsys.readouterr().out == "a.md\n"

    def test_explicit_files_command(self, in_notes, capsys):
        assert run_cli(["files", "alpha"]) == 0

        assert capsys.readouterr().out == "a.md\nb.txt\n"

    def test_or_mode(self, in_notes, capsys):
        """--or should match files carrying any keyword."""
        assert run_cli(["--or", "alpha", "beta"]) == 0

        assert capsys.readouterr().out == "a.md\nb.txt\n"

    def test_negated_keyword(self, in_notes, capsys):
        """A ! keyword should veto files carrying that tag."""
        assert run_cli(["alpha", "!beta", "--any"]) == 0

        assert capsys.readouterr().out == "b.txt\n"

    def test_case_insensitive_keywords(self, in_notes, capsys):
        assert run_cli(["BETA"]) == 0

        assert capsys.readouterr().out == "a.md\n"

    def test_no_match_reports_missing_tag(self, in_notes, capsys):
        """A required tag found nowhere should be noted on stderr only."""
        assert run_cli(["alpha", "nowhere"]) == 0

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No matches for `nowhere`" in captured.err

    def test_root_option(self, notes_dir, capsys):
        """--root should select files under another directory."""
        assert run_cli(["files", "-r", str(notes_dir), "beta"]) == 0

        assert capsys.readouterr().out == "a.md\n"

    def test_glob_option(self, in_notes, capsys):
        """--glob should restrict the file selection."""
        assert run_cli(["alpha", "-g", "**/*.txt"]) == 0

        assert capsys.readouterr().out == "b.txt\n"

    def test_explicit_files_with_unreadable(self, in_notes, capsys):
        """An unreadable file should be reported without stopping the run."""
        assert run_cli(["files", "-f", "missing.md", "-f", "b.txt", "alpha"]) == 0

        captured = capsys.readouterr()
        assert captured.out == "b.txt\n"
        assert "missing.md" in captured.err

    def test_workers_option(self, in_notes, capsys):
        assert run_cli(["alpha", "-j", "3"]) == 0

        assert capsys.readouterr().out == "a.md\nb.txt\n"

    def test_keywords_after_options(self, in_notes, capsys):
        """Keywords should be accepted on both sides of an option."""
        assert run_cli(["alpha", "--or", "beta"]) == 0
        assert capsys.readouterr().out == "a.md\nb.txt\n"

        assert run_cli(["files", "alpha", "-g", "**/*.md", "beta"]) == 0
        assert capsys.readouterr().out == "a.md\n"

    def test_not_option(self, in_notes, capsys):
        """--not should exclude a tag like a ! keyword."""
        assert run_cli(["alpha", "--not", "beta"]) == 0
        assert capsys.readouterr().out == "b.txt\n"

    def test_not_option_alone_lists_files(self, in_notes, capsys):
        """--not without keywords is still a query, so files are listed."""
        assert run_cli(["--not", "beta"]) == 0

        assert capsys.readouterr().out == "b.txt\nc.md\n"

    def test_vim_output(self, in_notes, capsys):
        """--vim should print quickfix entries."""
        assert run_cli(["alpha", "--vim"]) == 0

        assert capsys.readouterr().out == "a.md:1:\nb.txt:1:\n"


class TestTagsCommand:
    """Tests for listing tags."""

    def test_empty_query_lists_tags_with_hint(self, in_notes, capsys):
        """No arguments should list all tags, after the untagged note."""
        assert run_cli([]) == 0

        assert capsys.readouterr().out == (
            "1 untagged files. View with `tagsearch untagged`.\n\nalpha, beta\n"
        )

    def test_tags_of_matching_files(self, in_notes, capsys):
        """Only tags of matching files should be listed."""
        assert run_cli(["tags", "alpha", "!beta"]) == 0

        assert capsys.readouterr().out == "alpha\n"

    def test_long_list(self, in_notes, capsys):
        """A listing flag without a command should list tags."""
        assert run_cli(["-l", "alpha"]) == 0

        assert capsys.readouterr().out == "alpha\nbeta\n"

    def test_numeric(self, in_notes, capsys):
        """--numeric should sort by frequency and show counts."""
        assert run_cli(["tags", "-n", "alpha"]) == 0

        assert capsys.readouterr().out == "alpha - 2, beta - 1\n"

    def test_summarise(self, in_notes, capsys):
        """--summarise should show each tag's files beneath it."""
        assert run_cli(["tags", "-s", "alpha"]) == 0

        assert capsys.readouterr().out == "alpha\n\ta.md\n\tb.txt\nbeta\n\ta.md\n"


class TestOtherCommands:
    """Tests for untagged, similar and top-level behavior."""

    def test_untagged(self, in_notes, capsys):
        assert run_cli(["untagged"]) == 0

        assert capsys.readouterr().out == "c.md\n"

    def test_untagged_vim_output(self, in_notes, capsys):
        assert run_cli(["untagged", "--vim"]) == 0

        assert capsys.readouterr().out == "c.md:1:Ignore this message\n"

    def test_similar(self, in_notes, capsys):
        (in_notes / "d.md").write_text("@note and @notes")

        assert run_cli(["similar"]) == 0

        assert capsys.readouterr().out == "Similar tags:\nPLURAL - note & notes\n"

    def test_version(self, capsys):
        assert run_cli(["--version"]) == 0

        assert __version__ in capsys.readouterr().out

    def test_config_file(self, in_notes, capsys):
        """--config should load settings from TOML."""
        toml_path = in_notes / "tagsearch.toml"
        toml_path.write_text('filter_mode = "any"', encoding="utf-8")

        assert run_cli(["-c", str(toml_path), "alpha", "beta"]) == 0

        assert capsys.readouterr().out == "a.md\nb.txt\n"

    def test_config_single_glob_string(self, in_notes, capsys):
        """A glob_patterns string should select only files matching it."""
        toml_path = in_notes / "tagsearch.toml"
        toml_path.write_text('[scan]\nglob_patterns = "**/*.txt"', encoding="utf-8")

        assert run_cli(["-c", str(toml_path), "alpha"]) == 0

        assert capsys.readouterr().out == "b.txt\n"


class TestErrors:
    """Tests for error exits."""

    def test_malformed_term(self, in_notes, capsys):
        """A bare ! should exit 1 with an error message."""
        assert run_cli(["alpha", "!"]) == 1

        assert "Error: Malformed query term" in capsys.readouterr().err

    def test_missing_root(self, tmp_path, capsys):
        assert run_cli(["files", "-r", str(tmp_path / "nope"), "alpha"]) == 1

        assert "does not exist" in capsys.readouterr().err

    def test_bad_workers(self, in_notes, capsys):
        assert run_cli(["alpha", "-j", "0"]) == 1

        assert "workers" in capsys.readouterr().err

    def test_unknown_command_option(self, in_notes):
        """argparse usage errors should exit 2."""
        assert run_cli(["untagged", "--numeric"]) == 2

    def test_stray_argument_without_keywords(self, in_notes, capsys):
        """A bare argument to a command without keywords is a usage error."""
        assert run_cli(["untagged", "stray"]) == 2

        assert "unrecognized arguments: stray" in capsys.readouterr().err

    def test_bad_log_level(self, in_notes, capsys, monkeypatch):
        """An unknown log level should exit 1 with an error message."""
        monkeypatch.setenv("TAGSEARCH_LOG_LEVEL", "verbose")

        assert run_cli(["alpha"]) == 1

        err = capsys.readouterr().err
        assert "Error:" in err
        assert "log_level" in err


class TestResolveCommand:
    """Tests for resolve_command."""

    def test_empty_query_uses_configured_command(self):
        args = create_parser().parse_args(["files"])

        assert resolve_command(args, Config()) == "tags"
        assert resolve_command(args, Config(empty_query_command="untagged")) == "untagged"

    def test_help_explains_command_name_keywords(self):
        assert "tagsearch files KEYWORD" in create_parser().epilog

    def test_other_commands_unchanged(self):
        args = create_parser().parse_args(["similar", "x"])

        assert resolve_command(args, Config()) == "similar"
