# ABOUTME: Boundary for interactive file selection supplied by the presentation layer.
# ABOUTME: A picker is awaited once and yields zero or more payloads; empty means cancelled.

import asyncio
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from readshelf.catalog.types import FilePayload


@runtime_checkable
class FilePicker(Protocol):
    """Asks the user for ebook files and returns them as payloads."""

    async def select_files(self) -> list[FilePayload]: ...


class PathListPicker:
    """Picker over a fixed list of local paths, read off the event loop.

    Used by the command line, where the "dialog" is the argument list.
    """

    def __init__(self, paths: Sequence[Path]) -> None:
        self._paths = list(paths)

    async def select_files(self) -> list[FilePayload]:
        return list(
            await asyncio.gather(
                *(asyncio.to_thread(FilePayload.from_path, path) for path in self._paths)
            )
        )
