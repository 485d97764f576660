import logging
import mimetypes
import os
import stat
from pathlib import Path
from typing import Callable, Union

ContentTypeSniffer = Callable[[Path], str]

DIRECTORY = 'inode/directory'
SYMLINK = 'inode/symlink'
ZERO_SIZE = 'application/x-zerosize'
TEXT = 'text/plain'
BINARY = 'application/octet-stream'

PEEK_SIZE = 1024

_SPECIAL_TYPES = (
    (stat.S_ISCHR, 'inode/chardevice'),
    (stat.S_ISBLK, 'inode/blockdevice'),
    (stat.S_ISFIFO, 'inode/fifo'),
    (stat.S_ISSOCK, 'inode/socket'),
)


def _looks_like_text(head: bytes) -> bool:
    if b'\x00' in head:
        return False
    try:
        head.decode('utf-8')
    except UnicodeDecodeError as e:
        # A multi-byte sequence cut off by the peek window is still text
        return e.start >= len(head) - 3 and e.reason == 'unexpected end of data'
    return True


def _peek(path: Path) -> str:
    try:
        with open(path, 'rb') as f:
            head = f.read(PEEK_SIZE)
    except OSError as e:
        logging.warning(f"Cannot read {path} for type detection: {e}")
        return BINARY
    return TEXT if _looks_like_text(head) else BINARY


def sniff_content_type(path: Union[str, Path]) -> str:
    """Best-guess content type for a filesystem path."""
    path = Path(path)
    try:
        st = os.stat(path)
    except FileNotFoundError:
        return SYMLINK if os.path.islink(path) else BINARY
    except OSError as e:
        logging.warning(f"Cannot stat {path}: {e}")
        return BINARY

    if stat.S_ISDIR(st.st_mode):
        return DIRECTORY
    for check, content_type in _SPECIAL_TYPES:
        if check(st.st_mode):
            return content_type
    if st.st_size == 0:
        return ZERO_SIZE

    guessed, _ = mimetypes.guess_type(path.name, strict=False)
    if guessed:
        return guessed
    return _peek(path)
