import logging
from pathlib import Path
from typing import Optional, Union

from rofi_files.core.directory_lister import DirectoryLister
from rofi_files.ui.menu_formatter import MenuLineFormatter
from rofi_files.utils.launcher import Launcher
from rofi_files.utils.state_store import LastDirectoryStore


class Navigator:
    """Decides what a single launcher invocation does.

    The cursor is the stored last directory, or home when there is none. An
    argument is resolved against the cursor: files are launched, directories
    are remembered and listed, anything else is ignored.
    """

    def __init__(
        self,
        store: LastDirectoryStore,
        lister: DirectoryLister,
        launcher: Launcher,
        home: Optional[Path] = None,
        prompt: str = 'Files'
    ):
        self.store = store
        self.lister = lister
        self.launcher = launcher
        self.home = home or Path.home()
        self.prompt = prompt

    def cursor(self) -> Path:
        return self.store.load() or self.home

    def render(self, directory: Path) -> str:
        """Prompt line followed by the formatted listing of ``directory``"""
        listing = MenuLineFormatter.format(self.lister.list(directory))
        return f"{MenuLineFormatter.prompt(self.prompt)}\n{listing}"

    def navigate(self, argument: Optional[Union[str, Path]] = None) -> Optional[str]:
        """Return the text to print, or None when nothing should be printed"""
        cursor = self.cursor()
        if argument is None:
            return self.render(cursor)

        target = cursor / argument
        if target.is_file():
            self.launcher.launch(target)
            return None
        if target.is_dir():
            # Only a directory that could be listed becomes the new cursor
            output = self.render(target)
            self.store.save(target)
            return output

        logging.info(f"Ignoring selection {target}: not a file or directory")
        return None
