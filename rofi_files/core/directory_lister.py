import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from rofi_files.core.content_type import ContentTypeSniffer, sniff_content_type
from rofi_files.errors import DirectoryAccessError
from rofi_files.ui.file_icons import IconCatalog
from rofi_files.ui.menu_formatter import MenuLine


@dataclass
class DirectoryEntry:
    name: str
    path: Path
    is_dir: bool
    raw_name: bytes

    @property
    def display_name(self) -> str:
        return self.raw_name.decode('utf-8', errors='replace')


def decoded_name(name: str) -> Optional[str]:
    """Return the name as text, or None if it holds undecodable bytes"""
    try:
        name.encode('utf-8')
    except UnicodeEncodeError:
        return None
    return name


class DirectoryLister:
    """Lists one directory level as launcher menu lines.

    Entries are filtered (dotfiles hidden), sorted with directories first and
    then by the raw bytes of their names, and paired with an icon resolved from
    the entry's content type.
    """

    def __init__(
        self,
        catalog: IconCatalog,
        sniffer: Optional[ContentTypeSniffer] = None
    ):
        self.catalog = catalog
        self.sniffer = sniffer or sniff_content_type

    @staticmethod
    def _filter_entry(entry: DirectoryEntry) -> bool:
        """Hide dotfiles; names that are not valid text are always kept"""
        name = decoded_name(entry.name)
        if name is None:
            return True
        return not name.startswith('.')

    @staticmethod
    def _sort_entries(entries: List[DirectoryEntry]) -> List[DirectoryEntry]:
        return sorted(entries, key=lambda e: (not e.is_dir, e.raw_name))

    def _scan_directory(self, dir_path: Path) -> List[DirectoryEntry]:
        """Scan one level of a directory, skipping entries that cannot be read"""
        try:
            scanner = os.scandir(dir_path)
        except OSError as e:
            raise DirectoryAccessError(f"Cannot open directory {dir_path}: {e}") from e

        entries = []
        with scanner:
            for item in scanner:
                try:
                    is_dir = item.is_dir(follow_symlinks=False)
                except OSError as e:
                    logging.warning(f"Skipping entry {item.path}: {e}")
                    continue
                entries.append(DirectoryEntry(
                    name=item.name,
                    path=Path(item.path),
                    is_dir=is_dir,
                    raw_name=os.fsencode(item.name)
                ))
        return entries

    def entries(self, directory: Union[str, Path]) -> List[DirectoryEntry]:
        """Filtered and sorted entries of a directory"""
        scanned = self._scan_directory(Path(directory))
        return self._sort_entries([e for e in scanned if self._filter_entry(e)])

    def list(self, directory: Union[str, Path]) -> List[MenuLine]:
        lines = []
        for entry in self.entries(directory):
            content_type = self.sniffer(entry.path)
            icon = self.catalog.resolve_icon(content_type)
            lines.append(MenuLine(entry.display_name, icon))
        return lines
