from abc import ABC, abstractmethod
from fsprims.core.shared_types import PathArg

class ITextStore(ABC):
    """
    Contract for moving raw bytes in and out of a file.
    Text encoding happens above this layer.
    """
    @abstractmethod
    def read_bytes(self, path: PathArg) -> bytes:
        """
        Returns the full byte content of the file.
        Raises OSError if the file cannot be read.
        """
        pass

    @abstractmethod
    def write_bytes(self, path: PathArg, data: bytes) -> None:
        """
        Creates or truncates the file and writes all of `data`.
        Raises OSError on any failure. No rollback is attempted.
        """
        pass
