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

from typing import Optional


class ConnectorError(Exception):
    """Base class for every failure raised while resolving a connection."""

    retryable = False

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        # set by connect() to the stage that raised
        self.stage: Optional[str] = None


class ProcessNotFound(ConnectorError):
    """The client application is not running."""

    retryable = True


class PermissionDenied(ConnectorError):
    pass


class InstallPathNotFound(ConnectorError):
    pass


class InvalidPath(ConnectorError):
    pass


class LockfileNotFound(ConnectorError):
    """The client is running but its lockfile is absent (yet)."""

    retryable = True


class LockfileUnreadable(ConnectorError):
    pass


class InvalidEncoding(ConnectorError):
    pass


class MalformedLockfile(ConnectorError):
    pass


class InvalidField(ConnectorError):
    def __init__(self, field: str, detail: str) -> None:
        super().__init__(f"Invalid {field} in lockfile: {detail}")
        self.field = field
