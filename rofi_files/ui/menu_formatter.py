"""Encoding of menu rows into rofi's script-mode line protocol.

Each row is ``<name>\\x00<key>\\x1f<value>``. A row with an empty name sets a
mode option instead of adding an entry (used for the prompt).
"""
from dataclasses import dataclass
from typing import Iterable

ROW_SEPARATOR = '\x00'
FIELD_SEPARATOR = '\x1f'
PARENT_NAME = '..'
PARENT_ICON = 'folder'


@dataclass(frozen=True)
class MenuLine:
    name: str
    icon: str

    def encode(self) -> str:
        return f"{self.name}{ROW_SEPARATOR}icon{FIELD_SEPARATOR}{self.icon}"


PARENT_LINE = MenuLine(PARENT_NAME, PARENT_ICON)


class MenuLineFormatter:
    """Handles formatting of directory listings for the host launcher"""

    @staticmethod
    def prompt(text: str) -> str:
        """Format the prompt-override line"""
        return f"{ROW_SEPARATOR}prompt{FIELD_SEPARATOR}{text}"

    @staticmethod
    def format(lines: Iterable[MenuLine]) -> str:
        """Format a listing, always led by the parent-navigation line"""
        rows = [PARENT_LINE.encode()]
        rows.extend(line.encode() for line in lines)
        return "\n".join(rows)
