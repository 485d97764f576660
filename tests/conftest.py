# conftest.py

import json
import pytest
from pathlib import Path
import tempfile

from rofi_files.resources.resources_manager import ResourcesManager

SPECIFIC_ICONS = """\
application/x-shellscript:application-x-executable
text/x-python:text-x-python
"""

GENERIC_ICONS = """\
application/x-foo:foo-icon
inode/directory:folder
text/plain:text-x-generic
application/x-shellscript:text-x-script
"""


@pytest.fixture(autouse=True)
def clear_resources():
    """Each test parses its own mapping files"""
    ResourcesManager.clear()
    yield
    ResourcesManager.clear()


@pytest.fixture
def temp_dir():
    """Provide temporary directory"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def icon_files(tmp_path):
    """Write a specific and a generic icon table, return their paths"""
    icons = tmp_path / 'icons'
    generic = tmp_path / 'generic-icons'
    icons.write_text(SPECIFIC_ICONS, encoding='utf-8')
    generic.write_text(GENERIC_ICONS, encoding='utf-8')
    return icons, generic


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Point home, config and cache directories into the test's tmp dir"""
    home = tmp_path / 'home'
    home.mkdir()
    monkeypatch.setenv('HOME', str(home))
    monkeypatch.setenv('XDG_CONFIG_HOME', str(tmp_path / 'config'))
    monkeypatch.setenv('XDG_CACHE_HOME', str(tmp_path / 'cache'))
    return tmp_path


@pytest.fixture
def configured_env(isolated_env, icon_files):
    """Isolated environment whose config points at the test icon tables"""
    icons, generic = icon_files
    config_dir = isolated_env / 'config' / 'rofi-files'
    config_dir.mkdir(parents=True)
    (config_dir / 'config.json').write_text(json.dumps({
        'icons_path': str(icons),
        'generic_icons_path': str(generic),
    }))
    return isolated_env
