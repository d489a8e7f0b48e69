import logging
from fsprims.core.shared_types import PathArg
from ..domain.interfaces import ITextStore

logger = logging.getLogger(__name__)

class LocalTextStore(ITextStore):
    """
    Byte transport over the local disk. Handles never outlive a single call.
    """

    def read_bytes(self, path: PathArg) -> bytes:
        with open(path, "rb") as f:
            data = f.read()
        logger.debug(f"Read {len(data)} bytes from {path}")
        return data

    def write_bytes(self, path: PathArg, data: bytes) -> None:
        # Parent directories are not created: a missing parent is a write failure
        with open(path, "wb") as f:
            f.write(data)
        logger.debug(f"Wrote {len(data)} bytes to {path}")
