import os
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional
from fsprims.core.common.enums import EntryKind

# Runs of "/" (and of the platform separator, where it differs)
_SEPARATOR_RUN = re.compile(r"/{2,}") if os.sep == "/" else re.compile(r"[\\/]{2,}")

Visitor = Callable[..., Any]

def collapse_separators(path: str) -> str:
    """
    Collapses every run of consecutive separators into one.
    e.g. "root//sub//file.txt" -> "root/sub/file.txt"
    """
    return _SEPARATOR_RUN.sub(lambda m: m.group(0)[0], path)

@dataclass(frozen=True)
class PathStatus:
    """
    Result of a status query on a single path.
    """
    is_directory: bool
    is_file: bool

    @property
    def kind(self) -> EntryKind:
        if self.is_directory:
            return EntryKind.DIRECTORY
        if self.is_file:
            return EntryKind.FILE
        return EntryKind.OTHER

@dataclass(frozen=True)
class DirEntry:
    """
    One immediate child of a directory, as reported by the listing.
    """
    name: str

@dataclass(frozen=True)
class BoundVisitor:
    """
    A visitor function plus the optional context it runs against.
    With a context, the function is invoked as a method of it
    (the context arrives as `self`); without one, as a plain function.
    """
    func: Visitor
    context: Optional[Any] = None

    def __call__(self, path: str) -> None:
        if self.context is None:
            self.func(path)
        else:
            self.func.__get__(self.context)(path)
