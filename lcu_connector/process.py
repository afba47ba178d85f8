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
import sys
from dataclasses import dataclass
from typing import List, Optional

import psutil

from .errors import PermissionDenied, ProcessNotFound

logger = logging.getLogger(__name__)

WINDOWS_PROCESS_NAME = "LeagueClientUx.exe"
POSIX_PROCESS_NAME = "LeagueClientUx"


@dataclass(frozen=True)
class ProcessInfo:
    pid: int
    name: str
    exe: str
    cmdline: Optional[List[str]] = None


def default_process_name(platform: Optional[str] = None) -> str:
    platform = platform or sys.platform
    if platform.startswith("win"):
        return WINDOWS_PROCESS_NAME
    return POSIX_PROCESS_NAME


def _inspect(proc: psutil.Process, name: str, with_cmdline: bool) -> ProcessInfo:
    pid = proc.pid
    try:
        exe = proc.exe() or ""
        cmdline = list(proc.cmdline()) if with_cmdline else None
    except psutil.AccessDenied as e:
        raise PermissionDenied(f"Access denied while inspecting {name!r} (pid {pid})") from e
    return ProcessInfo(pid=pid, name=name, exe=exe, cmdline=cmdline)


def find_process(target_name: str, with_cmdline: bool = False) -> ProcessInfo:
    """Return the first running process whose name equals ``target_name``.

    The executable path is always captured; the argument vector only when
    ``with_cmdline`` is set. Enumeration order is whatever the OS reports.
    Raises ProcessNotFound when nothing matches and PermissionDenied when
    the process table or the matching process cannot be inspected.
    """
    try:
        for proc in psutil.process_iter(["pid", "name"]):
            name = proc.info.get("name")
            if name != target_name:
                continue
            try:
                info = _inspect(proc, name, with_cmdline)
            except psutil.NoSuchProcess:
                # exited between enumeration and inspection
                logger.debug("Process %s (pid %s) vanished, continuing scan", name, proc.pid)
                continue
            logger.debug("Found %s at pid %d (%s)", name, info.pid, info.exe)
            return info
    except (psutil.AccessDenied, PermissionError) as e:
        raise PermissionDenied(f"Process enumeration denied: {e}") from e
    raise ProcessNotFound(f"No running process named {target_name!r}. Is the client running?")
