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

import base64
import enum
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Tuple, Union

from .errors import (
    InvalidEncoding,
    InvalidField,
    LockfileNotFound,
    LockfileUnreadable,
    MalformedLockfile,
)

logger = logging.getLogger(__name__)

LOCKFILE_NAME = "lockfile"
FIELD_SEPARATOR = ":"
FIELD_NAMES = ("process_name", "process_id", "port", "password", "protocol")

# the client always authenticates this user against its local API
LCU_USERNAME = "riot"
LCU_ADDRESS = "127.0.0.1"

# widest pid any supported OS hands out (Windows DWORD)
MAX_PROCESS_ID = 2**32 - 1


class Protocol(str, enum.Enum):
    HTTP = "http"
    HTTPS = "https"


def redact_secret(value: str) -> str:
    if not value:
        return value
    if len(value) <= 4:
        return "****"
    return value[:2] + "****" + value[-2:]


def _check_int(name: str, value: object, low: int, high: int) -> None:
    # bool is an int subclass but never a valid pid or port
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidField(name, f"expected an integer, got {value!r}")
    if not low <= value <= high:
        raise InvalidField(name, f"{value} is outside {low}-{high}")


def _check_text(name: str, value: object) -> None:
    if not isinstance(value, str) or not value:
        raise InvalidField(name, "empty value")
    if FIELD_SEPARATOR in value:
        raise InvalidField(name, f"must not contain {FIELD_SEPARATOR!r}")


@dataclass(frozen=True)
class ConnectionDescriptor:
    """Validated lockfile contents.

    Every field is checked on construction, so an instance is always usable;
    ``protocol`` may be given as its lockfile token (``"https"``).
    """

    process_name: str
    process_id: int
    port: int
    password: str = field(repr=False)
    protocol: Protocol

    def __post_init__(self) -> None:
        _check_int("process_id", self.process_id, 0, MAX_PROCESS_ID)
        _check_int("port", self.port, 1, 65535)
        try:
            protocol = Protocol(self.protocol)
        except (TypeError, ValueError) as e:
            raise InvalidField("protocol", f"unknown protocol {self.protocol!r}") from e
        object.__setattr__(self, "protocol", protocol)
        _check_text("process_name", self.process_name)
        _check_text("password", self.password)

    @property
    def username(self) -> str:
        return LCU_USERNAME

    @property
    def address(self) -> str:
        return LCU_ADDRESS

    @property
    def base_url(self) -> str:
        return f"{self.protocol.value}://{self.address}:{self.port}"

    @property
    def auth(self) -> Tuple[str, str]:
        return (self.username, self.password)

    @property
    def b64_auth(self) -> str:
        token = f"{self.username}:{self.password}".encode("utf-8")
        return base64.b64encode(token).decode("ascii")

    @property
    def authorization_header(self) -> str:
        return f"Basic {self.b64_auth}"

    def to_line(self) -> str:
        return FIELD_SEPARATOR.join(
            [self.process_name, str(self.process_id), str(self.port), self.password, self.protocol.value]
        )

    def as_dict(self, redact: bool = True) -> Dict[str, object]:
        return {
            "process_name": self.process_name,
            "process_id": self.process_id,
            "port": self.port,
            "password": redact_secret(self.password) if redact else self.password,
            "protocol": self.protocol.value,
            "username": self.username,
            "address": self.address,
            "base_url": self.base_url,
        }


def lockfile_path(install_dir: str) -> str:
    return os.path.join(install_dir, LOCKFILE_NAME)


def read_lockfile(install_dir: str) -> bytes:
    path = lockfile_path(install_dir)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except (FileNotFoundError, NotADirectoryError) as e:
        raise LockfileNotFound(f"No lockfile at {path!r}") from e
    except OSError as e:
        raise LockfileUnreadable(f"Could not read {path!r}: {e}") from e
    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def _parse_unsigned(name: str, value: str) -> int:
    # int() would also accept signs, whitespace and underscores
    if not (value.isascii() and value.isdigit()):
        raise InvalidField(name, f"expected a non-negative integer, got {value!r}")
    return int(value)


def parse_lockfile(raw: Union[bytes, str]) -> ConnectionDescriptor:
    """Parse ``name:pid:port:password:protocol`` into a ConnectionDescriptor.

    The format is strict: exactly five fields, nothing defaulted. A lockfile
    caught mid-rewrite by the client shows up as InvalidEncoding or
    MalformedLockfile; callers retry on their own schedule.
    """
    if isinstance(raw, bytes):
        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidEncoding(f"Lockfile is not valid UTF-8: {e}") from e
    else:
        content = raw
    content = content.strip()
    if not content:
        raise MalformedLockfile("Lockfile is empty")

    parts = content.split(FIELD_SEPARATOR)
    if len(parts) != len(FIELD_NAMES):
        raise MalformedLockfile(f"Expected {len(FIELD_NAMES)} fields in lockfile, got {len(parts)}")
    name, pid_s, port_s, password, protocol_s = parts

    # ranges, protocol and empty strings are checked by the descriptor itself
    return ConnectionDescriptor(
        process_name=name,
        process_id=_parse_unsigned("process_id", pid_s),
        port=_parse_unsigned("port", port_s),
        password=password,
        protocol=protocol_s,  # type: ignore[arg-type]
    )
