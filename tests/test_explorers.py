"""
Tests for exact and glob path explorers.
"""

import os

import pytest

from pollwatch.explorers import ExactExplorer, GlobExplorer, explore_all
from pollwatch.snapshot import Snapshot
from pollwatch.types.errors import BraceExpansionError, GlobSyntaxError


def explore_glob(base, pattern: str) -> set[str]:
    """Explore ``pattern`` relative to ``base`` and return paths relative to it."""
    snapshot = Snapshot()
    GlobExplorer.from_cli_arg(f"{base}/{pattern}").explore(snapshot)
    return {os.path.relpath(path, base) for path in snapshot.paths()}


class TestExactExplorer:
    """Tests for ExactExplorer."""

    def test_from_cli_arg_stores_path_unmodified(self):
        explorer = ExactExplorer.from_cli_arg("./some/../path")
        assert explorer.path == "./some/../path"

    def test_existing_file_is_found(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("x")
        snapshot = Snapshot()

        ExactExplorer.from_cli_arg(str(path)).explore(snapshot)

        assert snapshot.get(str(path)) == path.stat().st_mtime_ns

    def test_directory_is_found(self, tmp_path):
        snapshot = Snapshot()
        ExactExplorer.from_cli_arg(str(tmp_path)).explore(snapshot)
        assert str(tmp_path) in snapshot

    def test_missing_path_contributes_nothing(self, tmp_path):
        snapshot = Snapshot()
        ExactExplorer.from_cli_arg(str(tmp_path / "missing")).explore(snapshot)
        assert len(snapshot) == 0

    def test_path_below_a_file_contributes_nothing(self, tmp_path):
        (tmp_path / "file").touch()
        snapshot = Snapshot()
        ExactExplorer.from_cli_arg(str(tmp_path / "file" / "child")).explore(snapshot)
        assert len(snapshot) == 0


class TestGlobExplorerConstruction:
    """Tests for GlobExplorer.from_cli_arg()."""

    @pytest.mark.parametrize("pattern", ["[", "**a", "a**", "{x,**a}"])
    def test_invalid_glob_is_rejected(self, pattern):
        with pytest.raises(GlobSyntaxError):
            GlobExplorer.from_cli_arg(pattern)

    def test_error_names_argument_and_pattern(self):
        with pytest.raises(GlobSyntaxError) as exc_info:
            GlobExplorer.from_cli_arg("{ok,bad**}")
        assert exc_info.value.pattern == "bad**"
        assert "{ok,bad**}" in str(exc_info.value)

    def test_unbalanced_braces_are_rejected(self):
        with pytest.raises(BraceExpansionError):
            GlobExplorer.from_cli_arg("config.{yml,yaml")

    def test_patterns_are_expanded_once(self):
        explorer = GlobExplorer.from_cli_arg("config.{yml,yaml,yml}")
        assert [p.pattern for p in explorer.patterns] == ["config.yaml", "config.yml"]


class TestGlobExplorerExplore:
    """Filesystem matching semantics."""

    def test_simple_pattern_finds_exact_match(self, files_in):
        base = files_in(["a.txt", "b.txt", "c.txt"])
        assert explore_glob(base, "b.txt") == {"b.txt"}

    def test_star_finds_matches(self, files_in):
        base = files_in(["a.txt", "bb.yaml", "ccc.txt"])
        assert explore_glob(base, "*.txt") == {"a.txt", "ccc.txt"}

    def test_star_does_not_match_slashes(self, files_in):
        base = files_in(["a.txt", "nested/b.txt", "nested/very/deeply/c.txt"])
        assert explore_glob(base, "*.txt") == {"a.txt"}

    def test_question_mark_matches_single_character(self, files_in):
        base = files_in(["cat.txt", "dog.txt", "snake.txt"])
        assert explore_glob(base, "???.txt") == {"cat.txt", "dog.txt"}

    def test_character_class(self, files_in):
        base = files_in(["a.txt", "b.txt", "bb.txt", "c.txt"])
        assert explore_glob(base, "[ab].txt") == {"a.txt", "b.txt"}

    def test_negated_character_class(self, files_in):
        base = files_in(["a.txt", "b.txt", "bb.txt", "c.txt"])
        assert explore_glob(base, "[!ab].txt") == {"c.txt"}

    def test_directories_are_matched(self, files_in):
        base = files_in(["a.txt", "nested/b.txt"])
        assert explore_glob(base, "nested") == {"nested"}

    def test_double_star_searches_subdirectories(self, files_in):
        base = files_in(["a.txt", "nested/b.txt", "nested/very/deeply/c.txt"])
        assert explore_glob(base, "nested/**/*.txt") == {
            "nested/b.txt",
            "nested/very/deeply/c.txt",
        }

    def test_brace_alternatives_are_all_explored(self, files_in):
        base = files_in(["config.yml", "config.yaml", "config.toml"])
        assert explore_glob(base, "config.{yml,yaml}") == {"config.yml", "config.yaml"}

    def test_no_match_contributes_nothing(self, files_in):
        base = files_in(["a.txt"])
        assert explore_glob(base, "*.md") == set()

    def test_dangling_symlink_is_skipped(self, files_in):
        base = files_in(["a.txt"])
        (base / "broken.txt").symlink_to(base / "gone.txt")
        assert explore_glob(base, "*.txt") == {"a.txt"}

    def test_relative_pattern_finds_relative_matches(self, files_in, monkeypatch):
        base = files_in(["src/main.py"])
        monkeypatch.chdir(base)
        snapshot = Snapshot()
        GlobExplorer.from_cli_arg("src/*.py").explore(snapshot)
        assert list(snapshot.paths()) == [os.path.join("src", "main.py")]


class TestExploreAll:
    """Tests for explore_all()."""

    def test_runs_every_explorer(self, files_in):
        base = files_in(["a.txt", "b.md"])
        explorers = [
            ExactExplorer.from_cli_arg(str(base / "a.txt")),
            GlobExplorer.from_cli_arg(f"{base}/*.md"),
            ExactExplorer.from_cli_arg(str(base / "missing")),
        ]
        snapshot = explore_all(explorers, Snapshot(len(explorers)))
        assert set(snapshot.paths()) == {str(base / "a.txt"), f"{base}/b.md"}

    def test_overlapping_explorers_record_once(self, files_in):
        base = files_in(["a.txt"])
        explorers = [
            ExactExplorer.from_cli_arg(f"{base}/a.txt"),
            GlobExplorer.from_cli_arg(f"{base}/*.txt"),
        ]
        assert len(explore_all(explorers, Snapshot())) == 1

    def test_unknown_explorer_type(self):
        with pytest.raises(TypeError):
            explore_all([object()], Snapshot())
