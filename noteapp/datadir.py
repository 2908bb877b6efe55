"""
Per-OS application data directory.

- Windows: %APPDATA%\\<app>
- macOS: ~/Library/Application Support/<app>
- Linux: $XDG_DATA_HOME/<app>, or ~/.local/share/<app>
- anything else: ~/<app>
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from .errors import DirectoryError


class DataDirResolver:
    """Return the absolute directory an application keeps its data in."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None, home: Optional[Path] = None):
        self._environ = os.environ if environ is None else environ
        self._home = home

    def home(self) -> Path:
        if self._home is not None:
            return self._home
        try:
            return Path.home()
        except RuntimeError as e:
            raise DirectoryError(f"cannot determine home directory: {e}") from e

    def base_dir(self) -> Path:
        raise NotImplementedError

    def resolve(self, app_name: str) -> Path:
        return self.base_dir() / app_name


class WindowsDataDir(DataDirResolver):
    def base_dir(self) -> Path:
        appdata = self._environ.get("APPDATA", "")
        if not appdata:
            raise DirectoryError("APPDATA environment variable not set")
        return Path(appdata)


class MacDataDir(DataDirResolver):
    def base_dir(self) -> Path:
        return self.home() / "Library" / "Application Support"


class XdgDataDir(DataDirResolver):
    def base_dir(self) -> Path:
        xdg = self._environ.get("XDG_DATA_HOME", "")
        if xdg:
            return Path(xdg)
        return self.home() / ".local" / "share"


class HomeDataDir(DataDirResolver):
    def base_dir(self) -> Path:
        return self.home()


def resolver_for_platform(platform: Optional[str] = None, **kwargs) -> DataDirResolver:
    """Pick the resolver for ``platform`` (defaults to ``sys.platform``)."""
    platform = platform or sys.platform
    if platform == "win32":
        return WindowsDataDir(**kwargs)
    if platform == "darwin":
        return MacDataDir(**kwargs)
    if platform.startswith("linux"):
        return XdgDataDir(**kwargs)
    return HomeDataDir(**kwargs)


def get_app_data_dir(app_name: str) -> Path:
    return resolver_for_platform().resolve(app_name)
