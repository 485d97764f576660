"""
Configuration handling for rofi-files
"""
from rofi_files.config.default_config import DEFAULT_CONFIG
from rofi_files.config.config_manager import ConfigManager, config_command, cache_dir, log_path

__all__ = [
    'DEFAULT_CONFIG',
    'ConfigManager',
    'config_command',
    'cache_dir',
    'log_path'
]
