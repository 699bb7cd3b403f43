"""Tests for working-directory matching."""

from __future__ import annotations

from pathlib import Path

from prompt_dialog.server.directory_matcher import canonicalize, directories_match


class TestCanonicalize:
    """Tests for canonicalize function."""

    def test_resolves_symlinks(self, tmp_path: Path) -> None:
        real = tmp_path / "real"
        real.mkdir()
        link = tmp_path / "link"
        link.symlink_to(real)

        assert canonicalize(link) == real.resolve()

    def test_missing_path_is_returned_as_given(self, tmp_path: Path) -> None:
        missing = tmp_path / "does-not-exist"
        assert canonicalize(missing) == missing


class TestDirectoriesMatch:
    """Tests for directories_match function."""

    def test_same_directory(self, tmp_path: Path) -> None:
        assert directories_match(tmp_path, tmp_path)

    def test_caller_nested_in_server_directory(self, tmp_path: Path) -> None:
        child = tmp_path / "src" / "pkg"
        child.mkdir(parents=True)
        assert directories_match(child, tmp_path)

    def test_server_nested_in_caller_directory(self, tmp_path: Path) -> None:
        child = tmp_path / "sub"
        child.mkdir()
        assert directories_match(tmp_path, child)

    def test_sibling_directories_do_not_match(self, tmp_path: Path) -> None:
        left = tmp_path / "left"
        right = tmp_path / "right"
        left.mkdir()
        right.mkdir()
        assert not directories_match(left, right)

    def test_shared_name_prefix_is_not_nesting(self, tmp_path: Path) -> None:
        project = tmp_path / "project"
        project_two = tmp_path / "project-two"
        project.mkdir()
        project_two.mkdir()
        assert not directories_match(project_two, project)

    def test_symlinked_caller_matches_real_server_directory(self, tmp_path: Path) -> None:
        real = tmp_path / "real"
        (real / "nested").mkdir(parents=True)
        link = tmp_path / "link"
        link.symlink_to(real)

        assert directories_match(link / "nested", real)

    def test_uncanonicalizable_paths_compare_as_given(self) -> None:
        assert directories_match(Path("/no/such/root/child"), Path("/no/such/root"))
        assert not directories_match(Path("/no/such/a"), Path("/no/such/b"))
