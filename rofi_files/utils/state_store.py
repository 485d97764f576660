import logging
import os
from pathlib import Path
from typing import Optional, Union

from rofi_files.errors import StateError

STATE_FILE_NAME = 'rofi_file_lastdir'


class LastDirectoryStore:
    """Persists the last visited directory between launcher invocations"""

    def __init__(self, cache_dir: Union[str, Path]):
        self.cache_dir = Path(cache_dir)
        self.path = self.cache_dir / STATE_FILE_NAME

    def ensure_cache_dir(self) -> None:
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StateError(f"Cannot create cache directory {self.cache_dir}: {e}") from e

    def load(self) -> Optional[Path]:
        """Return the stored directory if it can still be opened as a directory"""
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            logging.warning(f"Cannot read last directory from {self.path}: {e}")
            return None

        if not raw:
            return None
        lastdir = Path(os.fsdecode(raw))
        if not lastdir.is_dir():
            logging.info(f"Stored directory {lastdir} no longer exists")
            return None
        try:
            with os.scandir(lastdir):
                pass
        except OSError as e:
            logging.warning(f"Stored directory {lastdir} cannot be opened: {e}")
            return None
        return lastdir

    def save(self, directory: Union[str, Path]) -> Path:
        """Store the canonical form of ``directory`` and return it"""
        try:
            canonical = Path(directory).resolve(strict=True)
        except OSError as e:
            raise StateError(f"Cannot resolve directory {directory}: {e}") from e

        self.ensure_cache_dir()
        try:
            self.path.write_bytes(os.fsencode(canonical))
        except OSError as e:
            raise StateError(f"Cannot write last directory to {self.path}: {e}") from e
        return canonical
