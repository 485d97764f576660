import logging
from pathlib import Path
from typing import Union, Dict

from rofi_files.errors import ResourceError

DEFAULT_ICONS_PATH = '/usr/share/mime/icons'
DEFAULT_GENERIC_ICONS_PATH = '/usr/share/mime/generic-icons'


class ResourcesManager:
    """Centralized loader for the system content-type to icon mapping tables."""

    _resources = {}  # Parsed tables keyed by resolved path

    @staticmethod
    def parse_mapping(lines) -> Dict[str, str]:
        """Parse ``key:value`` lines, splitting on the first colon only."""
        table = {}
        for line in lines:
            line = line.rstrip('\r\n')
            key, sep, value = line.partition(':')
            if not sep:
                continue
            table[key] = value
        return table

    @classmethod
    def _load_mapping_resource(cls, path: Union[str, Path]) -> Dict[str, str]:
        """Load a mapping table from disk and cache it for the process lifetime."""
        key = str(path)
        if key in cls._resources:
            return cls._resources[key]

        try:
            with open(path, 'r', encoding='utf-8', errors='replace') as f:
                data = cls.parse_mapping(f)
        except FileNotFoundError as e:
            raise ResourceError(f"Icon mapping file not found: {path}") from e
        except OSError as e:
            raise ResourceError(f"Cannot read icon mapping file {path}: {e}") from e

        logging.debug(f"Loaded {len(data)} icon mappings from {path}")
        cls._resources[key] = data
        return data

    @classmethod
    def get_icons(cls, path: Union[str, Path] = None) -> Dict[str, str]:
        """Get the specific content-type icon table."""
        return cls._load_mapping_resource(path or DEFAULT_ICONS_PATH)

    @classmethod
    def get_generic_icons(cls, path: Union[str, Path] = None) -> Dict[str, str]:
        """Get the generic content-type icon table."""
        return cls._load_mapping_resource(path or DEFAULT_GENERIC_ICONS_PATH)

    @classmethod
    def clear(cls) -> None:
        cls._resources.clear()
