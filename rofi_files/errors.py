"""Exceptions raised by rofi-files"""


class RofiFilesError(Exception):
    """Base class for all rofi-files errors"""


class ResourceError(RofiFilesError):
    """An icon mapping resource is missing or unreadable"""


class DirectoryAccessError(RofiFilesError):
    """The directory being listed cannot be opened"""


class StateError(RofiFilesError):
    """The cache directory or last-directory state cannot be written"""


class LaunchError(RofiFilesError):
    """A selected file could not be spawned"""
