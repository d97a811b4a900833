# ABOUTME: End-to-end tests for the ReadShelf CLI.
# ABOUTME: Runs commands through Click's CliRunner against a temporary data directory.

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from readshelf.cli import cli


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


def _invoke(*args: str, input: str | None = None):
    runner = CliRunner()
    return runner.invoke(cli, list(args), input=input)


def _catalog(data_dir: Path) -> list[dict]:
    return json.loads((data_dir / "library.json").read_text())


class TestCliAdd:
    def test_add_copies_file(self, data_dir: Path, sample_epub: Path) -> None:
        result = _invoke("add", str(sample_epub), "--data-dir", str(data_dir))

        assert result.exit_code == 0
        assert "1 added" in result.output
        rows = _catalog(data_dir)
        assert len(rows) == 1
        assert rows[0]["format"] == "EPUB"
        assert Path(rows[0]["file_path"]).exists()

    def test_add_inline(self, data_dir: Path, sample_epub: Path) -> None:
        result = _invoke("add", "--inline", str(sample_epub), "--data-dir", str(data_dir))

        assert result.exit_code == 0
        rows = _catalog(data_dir)
        assert rows[0]["title"] == "Dune"
        assert rows[0]["file_data"].startswith("data:application/epub+zip;base64,")
        assert not (data_dir / "ebooks").exists()

    def test_add_inline_duplicate_reports_error(self, data_dir: Path, sample_epub: Path) -> None:
        _invoke("add", "--inline", str(sample_epub), "--data-dir", str(data_dir))
        result = _invoke("add", "--inline", str(sample_epub), "--data-dir", str(data_dir))

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert len(_catalog(data_dir)) == 1

    def test_add_unsupported_file(self, data_dir: Path, tmp_path: Path) -> None:
        source = tmp_path / "notes.docx"
        source.write_bytes(b"docx")

        result = _invoke("add", str(source), "--data-dir", str(data_dir))

        assert result.exit_code == 1
        assert "Unsupported format" in result.output

    def test_add_missing_file(self, data_dir: Path) -> None:
        result = _invoke("add", "/nonexistent/book.epub", "--data-dir", str(data_dir))
        assert result.exit_code != 0


class TestCliQueries:
    @pytest.fixture()
    def seeded(self, data_dir: Path, sample_epub: Path, sample_txt: Path) -> Path:
        _invoke("add", "--inline", str(sample_epub), str(sample_txt), "--data-dir", str(data_dir))
        return data_dir

    def test_ls_empty(self, data_dir: Path) -> None:
        result = _invoke("ls", "--data-dir", str(data_dir))
        assert result.exit_code == 0
        assert "No books in the library" in result.output

    def test_ls_shows_books(self, seeded: Path) -> None:
        result = _invoke("ls", "--data-dir", str(seeded))
        assert result.exit_code == 0
        assert "Dune" in result.output
        assert "2 book(s)" in result.output

    def test_search(self, seeded: Path) -> None:
        result = _invoke("search", "dune", "--data-dir", str(seeded))
        assert result.exit_code == 0
        assert "Dune" in result.output
        assert "1 result(s)" in result.output

    def test_search_no_results(self, seeded: Path) -> None:
        result = _invoke("search", "zzz", "--data-dir", str(seeded))
        assert "No results found" in result.output

    def test_info_by_prefix(self, seeded: Path) -> None:
        book_id = _catalog(seeded)[0]["id"]
        result = _invoke("info", book_id[:8], "--data-dir", str(seeded))

        assert result.exit_code == 0
        assert book_id in result.output
        assert "inline" in result.output

    def test_bracketed_title_is_shown_literally(self, seeded: Path) -> None:
        book_id = _catalog(seeded)[0]["id"]
        _invoke("edit", book_id, "--title", "[/b] [i]", "--data-dir", str(seeded))

        for args in (("ls",), ("search", "[/b]"), ("info", book_id)):
            result = _invoke(*args, "--data-dir", str(seeded))
            assert result.exit_code == 0, result.output
            assert "[/b]" in result.output
            assert "[i]" in result.output

    def test_info_unknown(self, seeded: Path) -> None:
        result = _invoke("info", "does-not-exist", "--data-dir", str(seeded))
        assert result.exit_code == 1
        assert "not found" in result.output


class TestCliMutations:
    @pytest.fixture()
    def book_id(self, data_dir: Path, sample_epub: Path) -> str:
        _invoke("add", str(sample_epub), "--data-dir", str(data_dir))
        return _catalog(data_dir)[0]["id"]

    def test_progress(self, data_dir: Path, book_id: str) -> None:
        result = _invoke("progress", book_id, "17", "--data-dir", str(data_dir))
        assert result.exit_code == 0
        assert _catalog(data_dir)[0]["last_read_position"] == 17

    def test_progress_rejects_negative(self, data_dir: Path, book_id: str) -> None:
        result = _invoke("progress", book_id, "-1", "--data-dir", str(data_dir))
        assert result.exit_code != 0

    def test_edit(self, data_dir: Path, book_id: str) -> None:
        result = _invoke(
            "edit", book_id, "--title", "Dune", "--author", "Frank Herbert", "--pages", "412",
            "--data-dir", str(data_dir),
        )
        assert result.exit_code == 0
        row = _catalog(data_dir)[0]
        assert (row["title"], row["author"], row["total_pages"]) == ("Dune", "Frank Herbert", 412)

    def test_rm(self, data_dir: Path, book_id: str) -> None:
        stored = Path(_catalog(data_dir)[0]["file_path"])
        result = _invoke("rm", book_id, "--data-dir", str(data_dir))

        assert result.exit_code == 0
        assert _catalog(data_dir) == []
        assert not stored.exists()

    def test_rm_unknown(self, data_dir: Path, book_id: str) -> None:
        result = _invoke("rm", "nope", "--data-dir", str(data_dir))
        assert result.exit_code == 1
        assert len(_catalog(data_dir)) == 1

    def test_rm_empty_id_matches_nothing(self, data_dir: Path, book_id: str) -> None:
        result = _invoke("rm", "", "--data-dir", str(data_dir))
        assert result.exit_code == 1
        assert len(_catalog(data_dir)) == 1

    def test_progress_reports_clamped_position(self, data_dir: Path, book_id: str) -> None:
        _invoke("edit", book_id, "--pages", "10", "--data-dir", str(data_dir))
        result = _invoke("progress", book_id, "50", "--data-dir", str(data_dir))

        assert result.exit_code == 0
        assert "position 10" in result.output

    def test_clear_requires_confirmation(self, data_dir: Path, book_id: str) -> None:
        result = _invoke("clear", "--data-dir", str(data_dir), input="n\n")
        assert result.exit_code != 0
        assert len(_catalog(data_dir)) == 1

    def test_clear_with_yes(self, data_dir: Path, book_id: str) -> None:
        result = _invoke("clear", "--yes", "--data-dir", str(data_dir))
        assert result.exit_code == 0
        assert _catalog(data_dir) == []


class TestCliPlatforms:
    def test_web_platform_keeps_nothing(self, sample_epub: Path) -> None:
        result = _invoke("add", str(sample_epub), "--platform", "web")
        assert result.exit_code == 0
        assert "1 added" in result.output

    def test_web_platform_cannot_browse(self) -> None:
        result = _invoke("browse", "--platform", "web")
        assert result.exit_code == 1
        assert "not available" in result.output

    def test_corrupt_catalog_warns(self, data_dir: Path) -> None:
        data_dir.mkdir(parents=True)
        (data_dir / "library.json").write_text("garbage")

        result = _invoke("ls", "--data-dir", str(data_dir))

        assert result.exit_code == 0
        assert "Warning" in result.output


class TestCliBrowse:
    def test_browse_and_pick(
        self, tmp_path: Path, book_tree: Path, data_dir: Path, monkeypatch,
    ) -> None:
        monkeypatch.setattr(
            "readshelf.storage.paths.DesktopPaths.default_browse_path",
            lambda self: book_tree,
        )

        result = _invoke("browse", "--data-dir", str(data_dir), input="2\n")

        assert result.exit_code == 0
        assert "Added" in result.output
        rows = _catalog(data_dir)
        assert rows[0]["format"] == "TXT"

    def test_browse_cancel(self, book_tree: Path, data_dir: Path, monkeypatch) -> None:
        monkeypatch.setattr(
            "readshelf.storage.paths.DesktopPaths.default_browse_path",
            lambda self: book_tree,
        )

        result = _invoke("browse", "--data-dir", str(data_dir), input="c\n")

        assert result.exit_code == 0
        assert "Cancelled" in result.output


class TestCliVersion:
    def test_help_lists_commands(self) -> None:
        result = _invoke("--help")
        assert result.exit_code == 0
        for name in ("add", "browse", "clear", "edit", "info", "ls", "progress", "rm", "search"):
            assert name in result.output
