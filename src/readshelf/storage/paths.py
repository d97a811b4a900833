# ABOUTME: Platform path resolution for the managed book store and the catalog file.
# ABOUTME: One variant per platform family, selected by name at process start.

import logging
import os
import sys
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable

from readshelf.errors import ConfigurationError

logger = logging.getLogger(__name__)

APP_DIR_NAME = "ReadShelf"
STORAGE_DIR_NAME = "ebooks"
CATALOG_FILE_NAME = "library.json"

PLATFORM_ENV_VAR = "READSHELF_PLATFORM"
DATA_DIR_ENV_VAR = "READSHELF_DATA_DIR"

ANDROID_DEFAULT_DOWNLOADS = Path("/storage/emulated/0/Download")


@runtime_checkable
class PlatformPaths(Protocol):
    """Where books and the catalog live on the running platform.

    ``storage_path`` and ``catalog_path`` return None when the platform has no
    durable filesystem (the catalog then lives only in memory).
    """

    supports_filesystem: bool

    def storage_path(self) -> Path | None: ...

    def catalog_path(self) -> Path | None: ...

    def default_browse_path(self) -> Path: ...


def local_data_dir(environ: Mapping[str, str] | None = None, platform: str | None = None) -> Path:
    """Return the per-user local application data directory.

    Raises:
        ConfigurationError: If the directory cannot be determined.
    """
    env = os.environ if environ is None else environ
    platform = platform or sys.platform

    if platform.startswith("win"):
        local_app_data = env.get("LOCALAPPDATA")
        if not local_app_data:
            raise ConfigurationError("Failed to get local data directory: LOCALAPPDATA is not set")
        return Path(local_app_data)

    try:
        home = Path.home()
    except RuntimeError as exc:
        raise ConfigurationError(f"Failed to get local data directory: {exc}") from exc

    if platform == "darwin":
        return home / "Library" / "Application Support"

    xdg_data_home = env.get("XDG_DATA_HOME")
    if xdg_data_home:
        return Path(xdg_data_home)
    return home / ".local" / "share"


class DesktopPaths:
    """Desktop layout: everything under the local data directory.

    Args:
        data_dir: Explicit application directory, bypassing the platform lookup.
        home: Directory the file browser starts in. Defaults to the user's home.
    """

    supports_filesystem = True

    def __init__(self, data_dir: Path | None = None, home: Path | None = None) -> None:
        self._data_dir = data_dir
        self._home = home

    def _base_dir(self) -> Path:
        if self._data_dir is not None:
            return self._data_dir
        return local_data_dir() / APP_DIR_NAME

    def storage_path(self) -> Path:
        return self._base_dir() / STORAGE_DIR_NAME

    def catalog_path(self) -> Path:
        return self._base_dir() / CATALOG_FILE_NAME

    def default_browse_path(self) -> Path:
        if self._home is not None:
            return self._home
        try:
            return Path.home()
        except RuntimeError:
            return Path(".")


def android_files_dir_from_env() -> str:
    """Ask the host for the app's private files directory.

    The Python-for-Android bootstrap exports it as ANDROID_PRIVATE.
    """
    try:
        return os.environ["ANDROID_PRIVATE"]
    except KeyError as exc:
        raise RuntimeError("ANDROID_PRIVATE is not set") from exc


class AndroidPaths:
    """Android layout: paths derived from the app's private files directory.

    The directory is obtained through a bridge callable on every lookup; any
    exception it raises surfaces as a ConfigurationError.
    """

    supports_filesystem = True

    def __init__(
        self,
        files_dir_bridge: Callable[[], str] = android_files_dir_from_env,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._bridge = files_dir_bridge
        self._environ = environ

    def _files_dir(self) -> Path:
        try:
            return Path(self._bridge())
        except Exception as exc:
            raise ConfigurationError(f"Failed to get Android storage: {exc}") from exc

    def storage_path(self) -> Path:
        return self._files_dir() / STORAGE_DIR_NAME

    def catalog_path(self) -> Path:
        return self._files_dir() / CATALOG_FILE_NAME

    def default_browse_path(self) -> Path:
        env = os.environ if self._environ is None else self._environ
        external = env.get("EXTERNAL_STORAGE")
        if external:
            return Path(external) / "Download"
        return ANDROID_DEFAULT_DOWNLOADS


class WebPaths:
    """Storage-less layout: no managed directory, no catalog file, no browser."""

    supports_filesystem = False

    def storage_path(self) -> None:
        return None

    def catalog_path(self) -> None:
        return None

    def default_browse_path(self) -> Path:
        raise ConfigurationError("Directory browsing is not available on this platform")


PLATFORMS: dict[str, Callable[..., PlatformPaths]] = {
    "desktop": DesktopPaths,
    "android": AndroidPaths,
    "web": WebPaths,
}


def resolve_platform(name: str | None = None, *, data_dir: Path | None = None) -> PlatformPaths:
    """Build the path resolver for a platform name.

    The name defaults to $READSHELF_PLATFORM, then ``desktop``. ``data_dir``
    (or $READSHELF_DATA_DIR) overrides the desktop application directory.

    Raises:
        ConfigurationError: If the platform name is unknown.
    """
    platform = (name or os.environ.get(PLATFORM_ENV_VAR) or "desktop").lower()
    if platform not in PLATFORMS:
        known = ", ".join(sorted(PLATFORMS))
        raise ConfigurationError(f"Unknown platform {platform!r} (expected one of: {known})")

    logger.debug("Resolved platform: %s", platform)
    if platform == "desktop":
        override = data_dir or os.environ.get(DATA_DIR_ENV_VAR)
        return DesktopPaths(data_dir=Path(override) if override else None)
    return PLATFORMS[platform]()
