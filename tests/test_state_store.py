import os

import pytest

from rofi_files.errors import StateError
from rofi_files.utils.state_store import LastDirectoryStore, STATE_FILE_NAME


@pytest.fixture
def store(tmp_path):
    return LastDirectoryStore(tmp_path / 'cache' / 'rofi')


def test_missing_state_is_none(store):
    assert store.load() is None


def test_save_then_load(store, tmp_path):
    target = tmp_path / 'target'
    target.mkdir()
    store.save(target)
    assert store.load() == target.resolve()


def test_save_writes_canonical_path(store, tmp_path):
    target = tmp_path / 'target'
    (target / 'child').mkdir(parents=True)
    saved = store.save(target / 'child' / '..')
    assert saved == target.resolve()
    assert (store.cache_dir / STATE_FILE_NAME).read_bytes() == os.fsencode(target.resolve())


def test_save_overwrites(store, tmp_path):
    first = tmp_path / 'first'
    second = tmp_path / 'second'
    first.mkdir()
    second.mkdir()
    store.save(first)
    store.save(second)
    assert store.load() == second.resolve()


def test_stale_state_is_ignored(store, tmp_path):
    target = tmp_path / 'gone'
    target.mkdir()
    store.save(target)
    target.rmdir()
    assert store.load() is None


def test_state_pointing_at_file_is_ignored(store, tmp_path):
    path = tmp_path / 'file'
    path.write_text("x")
    store.ensure_cache_dir()
    store.path.write_bytes(os.fsencode(path))
    assert store.load() is None


def test_save_missing_directory_is_an_error(store, tmp_path):
    with pytest.raises(StateError):
        store.save(tmp_path / 'missing')


def test_cache_dir_blocked_by_file(tmp_path):
    blocker = tmp_path / 'cache'
    blocker.write_text("not a directory")
    with pytest.raises(StateError):
        LastDirectoryStore(blocker / 'rofi').ensure_cache_dir()
