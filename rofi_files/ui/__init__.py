from rofi_files.ui.file_icons import IconCatalog
from rofi_files.ui.menu_formatter import MenuLine, MenuLineFormatter

__all__ = [
    'IconCatalog',
    'MenuLine',
    'MenuLineFormatter'
]
