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
from typing import Callable, Optional, TypeVar

import requests

from . import __version__
from .errors import ConnectorError
from .install_path import InstallPathResolver, resolve_install_dir, resolver_for_platform
from .lockfile import ConnectionDescriptor, parse_lockfile, read_lockfile
from .process import default_process_name, find_process

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _stage(stage: str, fn: Callable[[], T]) -> T:
    try:
        return fn()
    except ConnectorError as e:
        e.stage = stage
        logger.debug("%s failed at stage %r: %s", type(e).__name__, stage, e)
        raise


def get_install_dir(
    target_name: Optional[str] = None,
    *,
    resolver: Optional[InstallPathResolver] = None,
) -> str:
    """Locate the running client and return its installation directory."""
    target = target_name or default_process_name()
    chosen = resolver or resolver_for_platform()
    info = _stage("locate", lambda: find_process(target, with_cmdline=chosen.needs_cmdline))
    return _stage("resolve", lambda: resolve_install_dir(info, chosen))


def connect(
    target_name: Optional[str] = None,
    *,
    resolver: Optional[InstallPathResolver] = None,
) -> ConnectionDescriptor:
    """Resolve a fresh ConnectionDescriptor for the running client.

    Runs locate, resolve, read and parse in order and stops at the first
    failure. The raised error is the original one, with ``stage`` set.
    Descriptors go stale when the client restarts; call again to refresh.
    """
    install_dir = get_install_dir(target_name, resolver=resolver)
    raw = _stage("read", lambda: read_lockfile(install_dir))
    descriptor = _stage("parse", lambda: parse_lockfile(raw))
    logger.debug("Resolved %s on port %d (pid %d)", descriptor.process_name, descriptor.port, descriptor.process_id)
    return descriptor


def make_session(descriptor: ConnectionDescriptor, verify: bool = False) -> requests.Session:
    # The client serves a self-signed certificate, hence verify=False by default
    s = requests.Session()
    s.verify = verify
    s.auth = descriptor.auth  # BasicAuth tuple
    s.headers.update({
        "Accept": "application/json",
        "User-Agent": f"lcu_connector/{__version__}",
    })
    return s
