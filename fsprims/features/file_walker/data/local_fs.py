import os
import stat
from typing import Iterator
from ..domain.interfaces import IFileSystem
from ..domain.models import DirEntry, PathStatus

class LocalFileSystem(IFileSystem):
    """
    Concrete implementation over os.stat / os.scandir.
    Symlinks are followed, like a plain stat.
    """

    def stat(self, path: str) -> PathStatus:
        try:
            st = os.stat(path)
        except FileNotFoundError:
            # A dangling symlink is neither a file nor a directory: skip it, don't fail
            if os.path.islink(path):
                return PathStatus(is_directory=False, is_file=False)
            raise

        return PathStatus(
            is_directory=stat.S_ISDIR(st.st_mode),
            is_file=stat.S_ISREG(st.st_mode),
        )

    def list_dir(self, path: str) -> Iterator[DirEntry]:
        # Materialize inside the `with` so the handle is released before yielding
        with os.scandir(path) as it:
            entries = [DirEntry(name=entry.name) for entry in it]
        return iter(entries)

    def join(self, parent: str, name: str) -> str:
        return os.path.join(parent, name)
