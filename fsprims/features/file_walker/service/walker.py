import logging
import os
from typing import Any, List, Optional, Tuple
from fsprims.core.common.enums import EntryKind
from fsprims.core.common.errors import TraversalPathError
from fsprims.core.shared_types import PathArg
from ..domain.interfaces import IFileSystem
from ..domain.models import BoundVisitor, Visitor, collapse_separators
from ..data.local_fs import LocalFileSystem

logger = logging.getLogger(__name__)

class FileWalker:
    """
    Depth-first, pre-order enumeration of every regular file under a root.

    Failure policy: a path whose status, listing or visitor call fails is
    logged and skipped together with its subtree. The walk itself never
    raises for those; siblings are still visited.
    """

    def __init__(self, fs: Optional[IFileSystem] = None):
        self.fs = fs or LocalFileSystem()

    def walk_files(self, root: PathArg, visitor: Visitor, caller: Optional[Any] = None) -> None:
        """
        Invokes `visitor` once per regular file reachable from `root`.

        Args:
            root: A directory to descend into, or a single file.
            visitor: Called with each file path, separators collapsed.
            caller: Optional context; when given, `visitor` runs as a method of it.
        """
        bound = BoundVisitor(func=visitor, context=caller)
        root = os.fspath(root)

        # Explicit work-list instead of recursion, so tree depth is not bounded by the call stack
        pending: List[str] = [root]
        visited = 0
        skipped = 0

        logger.info(f"Walking files under: {root}")

        while pending:
            path = pending.pop()
            children, visited_file, error = self._step(path, bound)

            if error is not None:
                skipped += 1
                logger.error(str(error), exc_info=error.cause)
                continue

            if visited_file:
                visited += 1

            # Reversed so the listing order is preserved when popping
            pending.extend(reversed(children))

        logger.info(f"Walk complete. Visited {visited} files, skipped {skipped} paths.")

    def _step(self, path: str, visitor: BoundVisitor) -> Tuple[List[str], bool, Optional[TraversalPathError]]:
        """
        Processes one path.
        Returns (child paths to schedule, whether a file was visited, error).
        Failures come back as values; they are never raised from here.
        """
        try:
            status = self.fs.stat(path)

            if status.kind == EntryKind.DIRECTORY:
                children = [self.fs.join(path, entry.name) for entry in self.fs.list_dir(path)]
                return children, False, None

            if status.kind == EntryKind.FILE:
                visitor(collapse_separators(path))
                return [], True, None

            logger.debug(f"Skipping non-regular entry: {path}")
            return [], False, None

        except Exception as e:
            return [], False, TraversalPathError(path, e)
