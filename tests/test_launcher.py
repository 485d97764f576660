import subprocess
from unittest.mock import patch

import pytest

from rofi_files.errors import LaunchError
from rofi_files.utils.launcher import Launcher, is_executable


@pytest.fixture
def script(tmp_path):
    path = tmp_path / 'run.sh'
    path.write_text("#!/bin/sh\n")
    path.chmod(0o755)
    return path


@pytest.fixture
def document(tmp_path):
    path = tmp_path / 'my notes.txt'
    path.write_text("notes")
    path.chmod(0o644)
    return path


def test_is_executable(script, document):
    assert is_executable(script)
    assert not is_executable(document)


def test_any_execute_bit_counts(document):
    document.chmod(0o601)
    assert is_executable(document)


def test_executable_runs_directly(script):
    with patch('rofi_files.utils.launcher.subprocess.Popen') as popen:
        Launcher().launch(script)

    args, kwargs = popen.call_args
    assert args[0] == [str(script)]
    assert kwargs['stdin'] is subprocess.DEVNULL
    assert kwargs['stdout'] is subprocess.DEVNULL
    assert kwargs['stderr'] is subprocess.DEVNULL
    assert kwargs['start_new_session'] is True
    popen.return_value.wait.assert_not_called()


def test_document_goes_to_opener(document):
    with patch('rofi_files.utils.launcher.subprocess.Popen') as popen:
        Launcher(['xdg-open']).launch(document)

    command = popen.call_args[0][0]
    assert command == ['xdg-open', document.as_uri()]
    assert command[1].startswith('file://')
    assert '%20' in command[1]


def test_default_opener_is_gio(document):
    assert Launcher().command_for(document)[:2] == ['gio', 'open']


def test_spawn_failure_raises(document):
    with patch('rofi_files.utils.launcher.subprocess.Popen', side_effect=FileNotFoundError(2, 'No such file')):
        with pytest.raises(LaunchError):
            Launcher(['no-such-opener']).launch(document)


def test_missing_file_raises(tmp_path):
    with pytest.raises(LaunchError):
        Launcher().launch(tmp_path / 'missing')
