from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Union

from rofi_files.resources.resources_manager import ResourcesManager

FALLBACK_ICON = 'unknown'


class IconCatalog:
    """Resolve content types to icon-theme names.

    Lookups go through the specific table first, then the generic table,
    then a synthesized ``<media>-x-generic`` name, and finally ``unknown``.
    """

    def __init__(self, icons: Mapping[str, str], generic: Mapping[str, str]):
        self._icons = MappingProxyType(dict(icons))
        self._generic = MappingProxyType(dict(generic))

    @classmethod
    def from_files(
        cls,
        icons_path: Union[str, Path] = None,
        generic_path: Union[str, Path] = None
    ) -> 'IconCatalog':
        """Build a catalog from the system mapping files."""
        return cls(
            ResourcesManager.get_icons(icons_path),
            ResourcesManager.get_generic_icons(generic_path)
        )

    @property
    def icons(self) -> Mapping[str, str]:
        return self._icons

    def resolve_icon(self, content_type: str) -> str:
        """Get the icon name for a content type"""
        icon = self._icons.get(content_type)
        if icon is not None:
            return icon
        icon = self._generic.get(content_type)
        if icon is not None:
            return icon

        media, sep, _ = content_type.partition('/')
        if sep:
            return f"{media}-x-generic"
        return FALLBACK_ICON
