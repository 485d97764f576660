"""
Core functionality for rofi-files
"""
from rofi_files.core.content_type import sniff_content_type
from rofi_files.core.directory_lister import DirectoryEntry, DirectoryLister
from rofi_files.core.navigator import Navigator


__all__ = [
    'DirectoryEntry',
    'DirectoryLister',
    'Navigator',
    'sniff_content_type'
]
