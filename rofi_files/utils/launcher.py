import logging
import os
import stat
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Union

from rofi_files.errors import LaunchError

DEFAULT_OPENER = ['gio', 'open']


def is_executable(path: Union[str, Path]) -> bool:
    """True if any execute permission bit is set"""
    return bool(os.stat(path).st_mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))


class Launcher:
    """Spawns selected files as detached processes without waiting for them"""

    def __init__(self, opener: Optional[Sequence[str]] = None):
        self.opener = list(opener or DEFAULT_OPENER)

    def command_for(self, path: Union[str, Path]) -> List[str]:
        path = Path(path).absolute()
        if is_executable(path):
            return [str(path)]
        return [*self.opener, path.as_uri()]

    def launch(self, path: Union[str, Path]) -> None:
        try:
            command = self.command_for(path)
        except OSError as e:
            raise LaunchError(f"Cannot inspect {path}: {e}") from e

        logging.info(f"Launching {command}")
        try:
            subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True
            )
        except OSError as e:
            raise LaunchError(f"Cannot launch {command[0]}: {e}") from e
