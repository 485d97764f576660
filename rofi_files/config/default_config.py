"""Default configuration settings for rofi-files"""

DEFAULT_CONFIG = {
    'icons_path': '/usr/share/mime/icons',                  # Specific content-type icon table
    'generic_icons_path': '/usr/share/mime/generic-icons',  # Generic content-type icon table
    'opener': ['gio', 'open'],    # Command that opens non-executable files by URI
    'prompt': 'Files',            # Prompt shown by the launcher
    'cache_dir': None,            # State directory (None = $XDG_CACHE_HOME/rofi)
    'log_path': None,             # Log file path (None = <cache_dir>/rofi-files.log)
    'log_level': 'WARNING',       # Logging level
}
