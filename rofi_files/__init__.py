"""
rofi-files - a file browser data source for rofi's script mode
"""
from .core.directory_lister import DirectoryLister
from .core.navigator import Navigator
from .ui.file_icons import IconCatalog
from .ui.menu_formatter import MenuLine, MenuLineFormatter
from .utils.launcher import Launcher
from .utils.state_store import LastDirectoryStore

__version__ = "1.0.0"
__all__ = [
    'DirectoryLister',
    'Navigator',
    'IconCatalog',
    'MenuLine',
    'MenuLineFormatter',
    'Launcher',
    'LastDirectoryStore'
]
