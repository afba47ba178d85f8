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

__version__ = "0.1.0"

from .connector import connect, get_install_dir, make_session
from .errors import (
    ConnectorError,
    InstallPathNotFound,
    InvalidEncoding,
    InvalidField,
    InvalidPath,
    LockfileNotFound,
    LockfileUnreadable,
    MalformedLockfile,
    PermissionDenied,
    ProcessNotFound,
)
from .install_path import (
    ExecutableDirResolver,
    InstallDirArgumentResolver,
    resolve_install_dir,
    resolver_for_platform,
)
from .lockfile import ConnectionDescriptor, Protocol, parse_lockfile, read_lockfile
from .process import ProcessInfo, default_process_name, find_process

__all__ = [
    "ConnectionDescriptor",
    "ConnectorError",
    "ExecutableDirResolver",
    "InstallDirArgumentResolver",
    "InstallPathNotFound",
    "InvalidEncoding",
    "InvalidField",
    "InvalidPath",
    "LockfileNotFound",
    "LockfileUnreadable",
    "MalformedLockfile",
    "PermissionDenied",
    "ProcessInfo",
    "ProcessNotFound",
    "Protocol",
    "connect",
    "default_process_name",
    "find_process",
    "get_install_dir",
    "make_session",
    "parse_lockfile",
    "read_lockfile",
    "resolve_install_dir",
    "resolver_for_platform",
]
