"""
MIT License

Copyright (c) 2025

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Protocol, Sequence

from .errors import InstallPathNotFound, InvalidPath
from .process import ProcessInfo

logger = logging.getLogger(__name__)

INSTALL_DIR_FLAG = "--install-directory"


class InstallPathResolver(Protocol):
    needs_cmdline: bool

    def resolve(self, info: ProcessInfo) -> str:
        ...


def _validated(path: str) -> str:
    path = path.strip().strip('"').strip("'").strip()
    if not path:
        raise InvalidPath("Resolved install directory is empty")
    if "\x00" in path:
        raise InvalidPath(f"Resolved install directory contains a NUL byte: {path!r}")
    if not os.path.isabs(path):
        raise InvalidPath(f"Resolved install directory is not absolute: {path!r}")
    return os.path.normpath(path)


class ExecutableDirResolver:
    """The lockfile sits next to the client executable (Windows)."""

    needs_cmdline = False

    def resolve(self, info: ProcessInfo) -> str:
        if not info.exe:
            raise InstallPathNotFound(f"No executable path exposed for pid {info.pid}")
        return _validated(os.path.dirname(info.exe))


def _flag_value(args: Sequence[str], flag: str) -> Optional[str]:
    prefix = flag + "="
    for i, arg in enumerate(args):
        arg = arg.strip().strip('"')
        if arg.startswith(prefix):
            return arg[len(prefix):]
        if arg == flag and i + 1 < len(args):
            return args[i + 1]
    return None


class InstallDirArgumentResolver:
    """The executable is a launcher inside an app bundle; the real install
    directory is passed as ``--install-directory`` (macOS and other POSIX hosts).
    The value must be an absolute path for the host OS, so a Wine client's
    ``C:\\...`` directory is rejected as InvalidPath.
    """

    needs_cmdline = True

    def __init__(self, flag: str = INSTALL_DIR_FLAG) -> None:
        self.flag = flag

    def resolve(self, info: ProcessInfo) -> str:
        value = _flag_value(info.cmdline or [], self.flag)
        if value is None:
            raise InstallPathNotFound(f"{self.flag} not found in arguments of pid {info.pid}")
        return _validated(value)


def resolver_for_platform(platform: Optional[str] = None) -> InstallPathResolver:
    platform = platform or sys.platform
    if platform.startswith("win"):
        return ExecutableDirResolver()
    return InstallDirArgumentResolver()


def resolve_install_dir(info: ProcessInfo, resolver: Optional[InstallPathResolver] = None) -> str:
    resolver = resolver or resolver_for_platform()
    path = resolver.resolve(info)
    logger.debug("Install directory for pid %d: %s", info.pid, path)
    return path
