import os
import json
import logging
import click
from pathlib import Path
from typing import Dict, Any, Optional

from rich.console import Console
from rich.table import Table

from rofi_files.config.default_config import DEFAULT_CONFIG

LIST_KEYS = ['opener']
PATH_KEYS = ['icons_path', 'generic_icons_path', 'cache_dir', 'log_path']
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class ConfigManager:
    """
    Manages configuration for rofi-files, supporting persistent storage and manipulation.
    """
    DEFAULT_CONFIG = DEFAULT_CONFIG

    @classmethod
    def _get_config_path(cls) -> str:
        """
        Get the path to the configuration file, honouring XDG_CONFIG_HOME.
        """
        config_root = os.environ.get('XDG_CONFIG_HOME') or os.path.expanduser('~/.config')
        config_dir = os.path.join(config_root, 'rofi-files')
        os.makedirs(config_dir, exist_ok=True)
        return os.path.join(config_dir, 'config.json')

    @classmethod
    def load_config(cls) -> Dict[str, Any]:
        """
        Load configuration from file, merging with defaults.
        """
        config_path = cls._get_config_path()
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                saved_config = json.load(f)
        except FileNotFoundError:
            return cls.DEFAULT_CONFIG.copy()
        except (OSError, json.JSONDecodeError) as e:
            logging.warning(f"Ignoring unreadable config {config_path}: {e}")
            return cls.DEFAULT_CONFIG.copy()

        if not isinstance(saved_config, dict):
            logging.warning(f"Ignoring malformed config {config_path}")
            return cls.DEFAULT_CONFIG.copy()
        return {**cls.DEFAULT_CONFIG, **saved_config}

    @classmethod
    def save_config(cls, config: Dict[str, Any]):
        """
        Write the settings that differ from the defaults.

        Unknown keys are dropped. The file is replaced in one step so the
        launcher never reads a half-written config.
        """
        config_path = cls._get_config_path()
        overrides = {
            k: v for k, v in config.items()
            if k in cls.DEFAULT_CONFIG and v is not None and v != cls.DEFAULT_CONFIG[k]
        }

        tmp_path = f"{config_path}.tmp"
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(overrides, f, indent=4)
        os.replace(tmp_path, config_path)

    @classmethod
    def reset_config(cls) -> bool:
        """
        Drop all overrides. Returns False if there were none.
        """
        try:
            os.remove(cls._get_config_path())
        except FileNotFoundError:
            return False
        return True

    @classmethod
    def update_config(cls, updates: Dict[str, Any]):
        """
        Change individual settings. A value of None restores the default.
        """
        unknown = [k for k in updates if k not in cls.DEFAULT_CONFIG]
        if unknown:
            raise KeyError(f"Unknown configuration key(s): {', '.join(unknown)}")

        current_config = cls.load_config()
        for key, value in updates.items():
            current_config[key] = cls.DEFAULT_CONFIG[key] if value is None else value
        cls.save_config(current_config)


def cache_dir(config: Dict[str, Any]) -> Path:
    """Directory holding the last-directory state and the log file"""
    if config.get('cache_dir'):
        return Path(config['cache_dir']).expanduser()
    cache_root = os.environ.get('XDG_CACHE_HOME') or os.path.expanduser('~/.cache')
    return Path(cache_root) / 'rofi'


def log_path(config: Dict[str, Any]) -> Path:
    if config.get('log_path'):
        return Path(config['log_path']).expanduser()
    return cache_dir(config) / 'rofi-files.log'


def convert_value(key: str, value: str) -> Any:
    """Convert a command-line string into the type stored for ``key``"""
    if key in LIST_KEYS:
        return [part.strip() for part in value.split(',') if part.strip()]
    if key == 'log_level':
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
    if key in PATH_KEYS and value.lower() in ['', 'none']:
        return None
    return value


def config_command(action, key=None, value=None, console: Optional[Console] = None):
    """
    Handle configuration management CLI actions.
    """
    if action == 'view':
        config = ConfigManager.load_config()
        table = Table(title="rofi-files configuration", show_header=True)
        table.add_column("Key", style="bold cyan")
        table.add_column("Value")
        for k, v in config.items():
            table.add_row(k, str(v))
        (console or Console()).print(table)

    elif action == 'reset':
        if ConfigManager.reset_config():
            click.echo("Configuration reset to default.")
        else:
            click.echo("Configuration already uses the defaults.")

    elif action == 'set':
        if not key or value is None:
            click.echo("Error: Both key and value are required.", err=True)
            return False

        if key not in ConfigManager.DEFAULT_CONFIG:
            click.echo(f"Error: Unknown configuration key '{key}'.", err=True)
            return False

        try:
            value = convert_value(key, value)
        except ValueError as e:
            click.echo(f"Invalid value for {key}: {e}", err=True)
            return False

        ConfigManager.update_config({key: value})
        click.echo(f"Set {key} to {value}")

    return True
