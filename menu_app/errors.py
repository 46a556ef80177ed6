"""Error kinds surfaced by the menu cache."""

from __future__ import annotations


class MenuError(Exception):
    """Base class for failures shown to the user as a single message."""


class FetchFailure(MenuError):
    """The remote menu could not be fetched or had an unexpected shape."""


class StorageFailure(MenuError):
    """The local menu database could not be created, read or written."""


class MalformedEntry(MenuError):
    """A remote record is missing a required field or has an invalid value."""

    def __init__(self, position: int, reason: str) -> None:
        super().__init__(f"Menu record {position} is malformed: {reason}")
        self.position = position
        self.reason = reason
