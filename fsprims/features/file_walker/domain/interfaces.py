from abc import ABC, abstractmethod
from typing import Iterator
from .models import DirEntry, PathStatus

class IFileSystem(ABC):
    """
    Contract for the file-system capabilities a walk needs.
    Abstracts the local disk so walks can run against any tree.
    """
    @abstractmethod
    def stat(self, path: str) -> PathStatus:
        """
        Reports whether `path` is a directory, a regular file, or neither.
        Raises OSError if the status cannot be determined.
        """
        pass

    @abstractmethod
    def list_dir(self, path: str) -> Iterator[DirEntry]:
        """
        Yields the immediate entries of a directory in the order the
        platform returns them (not sorted).
        Raises OSError if the directory cannot be listed.
        """
        pass

    @abstractmethod
    def join(self, parent: str, name: str) -> str:
        """Joins a directory path and an entry name."""
        pass
