# ABOUTME: Shared pytest fixtures for ReadShelf tests.
# ABOUTME: Provides temporary platform layouts, libraries, sample book files, and payloads.

from collections.abc import Callable
from pathlib import Path

import pytest
from ebooklib import epub

from readshelf.catalog.types import FilePayload
from readshelf.core.library import Library
from readshelf.storage.paths import DesktopPaths, WebPaths


@pytest.fixture
def desktop_paths(tmp_path: Path) -> DesktopPaths:
    """Desktop layout rooted in a temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    return DesktopPaths(data_dir=tmp_path / "data", home=home)


@pytest.fixture
def library(desktop_paths: DesktopPaths) -> Library:
    """An empty filesystem-backed library."""
    return Library(desktop_paths)


@pytest.fixture
def web_library() -> Library:
    """An empty storage-less library."""
    return Library(WebPaths())


@pytest.fixture
def sample_epub(tmp_path: Path) -> Path:
    """Create a minimal valid EPUB file."""
    book = epub.EpubBook()

    book.set_identifier("test-isbn-978-0-441-17271-9")
    book.set_title("Dune")
    book.set_language("en")
    book.add_author("Frank Herbert")

    chapter = epub.EpubHtml(title="Chapter 1", file_name="chap01.xhtml", lang="en")
    chapter.content = b"<html><body><h1>Chapter 1</h1><p>Arrakis.</p></body></html>"
    book.add_item(chapter)

    book.toc = [epub.Link("chap01.xhtml", "Chapter 1", "chap01")]
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = ["nav", chapter]

    source_dir = tmp_path / "incoming"
    source_dir.mkdir(exist_ok=True)
    filepath = source_dir / "Dune.epub"
    epub.write_epub(str(filepath), book)
    return filepath


@pytest.fixture
def sample_txt(tmp_path: Path) -> Path:
    """A plain-text book."""
    source_dir = tmp_path / "incoming"
    source_dir.mkdir(exist_ok=True)
    filepath = source_dir / "Meditations.TXT"
    filepath.write_text("Begin the morning by saying to thyself...\n")
    return filepath


@pytest.fixture
def book_tree(tmp_path: Path) -> Path:
    """Directory with a mix of book files, other files, and a subdirectory.

    Layout:
        shelf/
            A/
                inner.pdf
            b.txt
            c.pdf
            notes.docx
    """
    root = tmp_path / "shelf"
    (root / "A").mkdir(parents=True)
    (root / "A" / "inner.pdf").write_bytes(b"%PDF-1.4 inner")
    (root / "b.txt").write_text("b")
    (root / "c.pdf").write_bytes(b"%PDF-1.4 c")
    (root / "notes.docx").write_bytes(b"docx")
    return root


@pytest.fixture
def make_payload() -> Callable[..., FilePayload]:
    """Factory for payloads with a declared size and a placeholder data URL."""

    def _make(
        name: str = "Dune.epub",
        mime_type: str = "application/epub+zip",
        size: int = 1000,
    ) -> FilePayload:
        return FilePayload(
            name=name,
            type=mime_type,
            size=size,
            data=f"data:{mime_type or 'application/octet-stream'};base64,AAAA",
        )

    return _make
