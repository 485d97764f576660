from rofi_files.resources.resources_manager import (
    ResourcesManager,
    DEFAULT_ICONS_PATH,
    DEFAULT_GENERIC_ICONS_PATH,
)

__all__ = [
    'ResourcesManager',
    'DEFAULT_ICONS_PATH',
    'DEFAULT_GENERIC_ICONS_PATH'
]
