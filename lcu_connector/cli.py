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

import argparse
import json
import logging
import os
import sys
from typing import List, Optional, Sequence

from . import __version__
from .connector import connect, get_install_dir
from .errors import ConnectorError
from .io_utils import SupportsColor, print_table, status_line
from .lockfile import ConnectionDescriptor, lockfile_path, parse_lockfile, read_lockfile
from .process import default_process_name

PROCESS_ENV_VAR = "LCU_CONNECTOR_PROCESS"

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_RETRY_LATER = 3


def build_parser() -> argparse.ArgumentParser:
    cheatsheet = (
        "CLI Cheatsheet\n"
        "- --process: Client process name to look for (default: platform client name).\n"
        "- --install-dir: Read <dir>/lockfile directly, skipping process discovery.\n"
        "- --path: Print the client installation directory and exit.\n"
        "- --json: Print the connection descriptor as JSON.\n"
        "- --show-password: Do not mask the password.\n"
        f"- Env: {PROCESS_ENV_VAR}=<name> overrides the default process name.\n"
        f"- Exit codes: {EXIT_OK} ok, {EXIT_RETRY_LATER} client not running / no lockfile yet, "
        f"{EXIT_ERROR} any other failure."
    )
    p = argparse.ArgumentParser(
        prog="lcu-connector",
        description="Locate the running League Client and print its local API credentials.",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=cheatsheet,
    )
    p.add_argument(
        "--process",
        default=os.environ.get(PROCESS_ENV_VAR) or default_process_name(),
        help="Exact name of the client process (default: %(default)s).",
    )
    p.add_argument(
        "--install-dir",
        default=None,
        help="Client installation directory; skips process discovery.",
    )
    p.add_argument(
        "--path",
        action="store_true",
        help="Print the installation directory of the running client and exit.",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Print the descriptor as a JSON object.",
    )
    p.add_argument(
        "--show-password",
        action="store_true",
        help="Print the password in clear text.",
    )
    p.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log each discovery stage to stderr.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"lcu_connector {__version__}",
    )
    return p


def _report_error(err: ConnectorError, supports_color: SupportsColor) -> int:
    where = f" ({err.stage})" if err.stage else ""
    if err.retryable:
        print(status_line("wait", f"{type(err).__name__}{where}: {err} Try again later.", supports_color))
        return EXIT_RETRY_LATER
    print(status_line("fatal", f"{type(err).__name__}{where}: {err}", supports_color))
    return EXIT_ERROR


def _print_descriptor(info: ConnectionDescriptor, show_password: bool) -> None:
    # same masking as --json
    data = info.as_dict(redact=not show_password)
    rows: List[tuple[str, str]] = [
        ("process", info.process_name),
        ("pid", str(info.process_id)),
        ("port", str(info.port)),
        ("protocol", info.protocol.value),
        ("username", info.username),
        ("password", str(data["password"])),
        ("base_url", info.base_url),
    ]
    if show_password:
        rows.append(("authorization", info.authorization_header))
    print_table(["FIELD", "VALUE"], rows)


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(argv) if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    supports_color = SupportsColor.detect()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        if args.path:
            print(args.install_dir or get_install_dir(args.process))
            return EXIT_OK
        if args.install_dir:
            raw = read_lockfile(args.install_dir)
            info = parse_lockfile(raw)
        else:
            info = connect(args.process)
    except ConnectorError as e:
        return _report_error(e, supports_color)

    if args.json:
        print(json.dumps(info.as_dict(redact=not args.show_password), indent=2))
    else:
        if args.install_dir:
            print(status_line("info", lockfile_path(args.install_dir), supports_color))
        _print_descriptor(info, args.show_password)
    return EXIT_OK
