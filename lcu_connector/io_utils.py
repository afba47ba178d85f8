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

import os
import sys
from typing import List, Mapping, Optional, Sequence, TextIO

RESET = "\x1b[0m"

# one colour per CLI status tag
TAG_COLORS = {
    "info": "\x1b[36m",
    "wait": "\x1b[33m",
    "fatal": "\x1b[31m",
}


class SupportsColor:
    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    @staticmethod
    def detect(stream: TextIO = sys.stdout, environ: Optional[Mapping[str, str]] = None) -> "SupportsColor":
        env = os.environ if environ is None else environ
        enabled = stream.isatty() and "NO_COLOR" not in env and env.get("TERM") != "dumb"
        return SupportsColor(enabled)


def status_line(tag: str, message: str, supports_color: SupportsColor) -> str:
    """Render ``[tag] message``, coloured by tag when the terminal allows it."""
    text = f"[{tag}] {message}"
    color = TAG_COLORS.get(tag)
    if not supports_color.enabled or color is None:
        return text
    return f"{color}{text}{RESET}"


def format_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> List[str]:
    widths: List[int] = [len(h) for h in headers]
    for row in rows:
        for i, col in enumerate(row):
            widths[i] = max(widths[i], len(col))
    fmt = "  ".join("{:<" + str(w) + "}" for w in widths)
    lines = [fmt.format(*headers), "  ".join("-" * w for w in widths)]
    lines.extend(fmt.format(*row) for row in rows)
    return [line.rstrip() for line in lines]


def print_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    for line in format_table(headers, rows):
        print(line)
