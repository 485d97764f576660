from rofi_files.utils.launcher import Launcher, is_executable
from rofi_files.utils.state_store import LastDirectoryStore

__all__ = [
    'Launcher',
    'LastDirectoryStore',
    'is_executable'
]
