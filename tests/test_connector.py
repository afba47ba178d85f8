"""End-to-end resolution with the process table patched and a real lockfile on disk."""

from unittest.mock import patch

import pytest
import requests

from lcu_connector import __version__
from lcu_connector.connector import connect, get_install_dir, make_session
from lcu_connector.errors import (
    InstallPathNotFound,
    InvalidField,
    LockfileNotFound,
    MalformedLockfile,
    ProcessNotFound,
)
from lcu_connector.install_path import ExecutableDirResolver, InstallDirArgumentResolver
from lcu_connector.lockfile import Protocol
from lcu_connector.process import ProcessInfo


def _exe_in(directory):
    return ProcessInfo(pid=40, name="LeagueClientUx.exe", exe=str(directory / "LeagueClientUx.exe"))


@patch("lcu_connector.connector.find_process")
def test_connect_windows_layout(mock_find, install_dir_with_lockfile):
    mock_find.return_value = _exe_in(install_dir_with_lockfile)

    info = connect("LeagueClientUx.exe", resolver=ExecutableDirResolver())

    assert (info.process_name, info.process_id, info.port, info.password, info.protocol) == (
        "LeagueClient",
        1234,
        2999,
        "abc123XYZ",
        Protocol.HTTPS,
    )
    mock_find.assert_called_once_with("LeagueClientUx.exe", with_cmdline=False)


@patch("lcu_connector.connector.find_process")
def test_connect_macos_layout(mock_find, install_dir_with_lockfile):
    mock_find.return_value = ProcessInfo(
        pid=40,
        name="LeagueClientUx",
        exe="/Applications/LeagueClientUx.app/Contents/MacOS/LeagueClientUx",
        cmdline=["LeagueClientUx", f"--install-directory={install_dir_with_lockfile}"],
    )

    info = connect("LeagueClientUx", resolver=InstallDirArgumentResolver())

    assert info.port == 2999
    mock_find.assert_called_once_with("LeagueClientUx", with_cmdline=True)


@patch("lcu_connector.connector.default_process_name", return_value="LeagueClientUx.exe")
@patch("lcu_connector.connector.find_process")
def test_connect_uses_default_name(mock_find, _mock_default, install_dir_with_lockfile):
    mock_find.return_value = _exe_in(install_dir_with_lockfile)

    connect(resolver=ExecutableDirResolver())

    assert mock_find.call_args[0][0] == "LeagueClientUx.exe"


@patch("lcu_connector.connector.find_process")
def test_connect_twice_gives_equal_descriptors(mock_find, install_dir_with_lockfile):
    mock_find.return_value = _exe_in(install_dir_with_lockfile)
    resolver = ExecutableDirResolver()

    assert connect("x", resolver=resolver) == connect("x", resolver=resolver)


@patch("lcu_connector.connector.read_lockfile")
@patch("lcu_connector.connector.find_process")
def test_not_running_never_touches_filesystem(mock_find, mock_read):
    mock_find.side_effect = ProcessNotFound("No running process named 'LeagueClientUx'")

    with pytest.raises(ProcessNotFound) as exc:
        connect("LeagueClientUx", resolver=InstallDirArgumentResolver())

    assert exc.value.stage == "locate"
    assert exc.value.retryable is True
    mock_read.assert_not_called()


@patch("lcu_connector.connector.find_process")
def test_missing_lockfile(mock_find, tmp_path):
    mock_find.return_value = _exe_in(tmp_path)

    with pytest.raises(LockfileNotFound) as exc:
        connect("LeagueClientUx.exe", resolver=ExecutableDirResolver())

    assert exc.value.stage == "read"


@patch("lcu_connector.connector.find_process")
def test_missing_install_flag(mock_find):
    mock_find.return_value = ProcessInfo(pid=40, name="LeagueClientUx", exe="/x/LeagueClientUx", cmdline=["LeagueClientUx"])

    with pytest.raises(InstallPathNotFound) as exc:
        get_install_dir("LeagueClientUx", resolver=InstallDirArgumentResolver())

    assert exc.value.stage == "resolve"


@pytest.mark.parametrize(
    "content, error",
    [
        ("LeagueClient:1234:99999:abc123XYZ:https", InvalidField),
        ("LeagueClient:1234:2999:abc123XYZ", MalformedLockfile),
    ],
)
@patch("lcu_connector.connector.find_process")
def test_parse_errors_surface_unwrapped(mock_find, content, error, write_lockfile):
    mock_find.return_value = _exe_in(write_lockfile(content))

    with pytest.raises(error) as exc:
        connect("LeagueClientUx.exe", resolver=ExecutableDirResolver())

    assert type(exc.value) is error
    assert exc.value.stage == "parse"


@patch("lcu_connector.connector.find_process")
def test_get_install_dir(mock_find, tmp_path):
    mock_find.return_value = _exe_in(tmp_path)

    assert get_install_dir("LeagueClientUx.exe", resolver=ExecutableDirResolver()) == str(tmp_path)


def test_make_session(install_dir_with_lockfile):
    from lcu_connector.lockfile import parse_lockfile, read_lockfile

    info = parse_lockfile(read_lockfile(str(install_dir_with_lockfile)))
    session = make_session(info)

    assert isinstance(session, requests.Session)
    assert session.verify is False
    assert session.auth == ("riot", "abc123XYZ")
    assert session.headers["Accept"] == "application/json"
    assert session.headers["User-Agent"] == f"lcu_connector/{__version__}"
    assert make_session(info, verify=True).verify is True
