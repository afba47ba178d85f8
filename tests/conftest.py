"""
Shared fixtures for lcu_connector tests.

Nothing here touches the real process table: processes are MagicMocks shaped
like the psutil.Process objects yielded by psutil.process_iter(["pid", "name"]).
"""

from pathlib import Path
from typing import Callable, List, Optional
from unittest.mock import MagicMock

import psutil
import pytest

SAMPLE_LINE = "LeagueClient:1234:2999:abc123XYZ:https"


def make_proc(
    pid: int,
    name: Optional[str],
    exe: str = "",
    cmdline: Optional[List[str]] = None,
    exe_error: Optional[Exception] = None,
) -> MagicMock:
    proc = MagicMock(spec=psutil.Process)
    proc.pid = pid
    proc.info = {"pid": pid, "name": name}
    if exe_error is not None:
        proc.exe.side_effect = exe_error
    else:
        proc.exe.return_value = exe
    proc.cmdline.return_value = cmdline or []
    return proc


@pytest.fixture
def write_lockfile(tmp_path: Path) -> Callable[..., Path]:
    """Write ``content`` to ``<tmp_path>/lockfile`` and return the directory."""

    def _write(content: object = SAMPLE_LINE) -> Path:
        target = tmp_path / "lockfile"
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(str(content), encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def install_dir_with_lockfile(write_lockfile: Callable[..., Path]) -> Path:
    return write_lockfile(SAMPLE_LINE)
