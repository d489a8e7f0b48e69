from typing import Any, Optional
from fsprims.core.shared_types import PathArg
from ..domain.models import Visitor
from .walker import FileWalker

# Singleton Instance for easy import
walker = FileWalker()

def walk_files(root: PathArg, visitor: Visitor, caller: Optional[Any] = None) -> None:
    """
    Standalone API: calls `visitor` for every regular file under `root`
    on the local disk. Unreadable paths are logged and skipped, never raised.
    """
    walker.walk_files(root, visitor, caller)
