import os
from typing import Optional
from fsprims.core.config.settings import settings
from fsprims.core.common.errors import ReadError, WriteError
from fsprims.core.shared_types import PathArg
from ..domain.interfaces import ITextStore
from ..data.local_fs import LocalTextStore

class TextIOService:
    """
    Facade for the TextIO feature.
    Decodes/encodes text on top of a byte store and maps OS failures
    onto ReadError / WriteError.
    """
    def __init__(self, store: Optional[ITextStore] = None):
        self.store = store or LocalTextStore()

    def read_text(self, path: PathArg) -> str:
        """
        Reads the whole file and decodes it.
        Malformed byte sequences are replaced, not rejected.

        Raises:
            ReadError: if the file is missing, unreadable or not a regular file,
                or its bytes cannot be decoded with the configured codec.
        """
        try:
            data = self.store.read_bytes(path)
        except OSError as e:
            raise ReadError(os.fspath(path), e.strerror or str(e)) from e

        try:
            return data.decode(settings.TEXT_ENCODING, errors=settings.DECODE_ERRORS)
        except (UnicodeDecodeError, LookupError) as e:
            # Strict decoding or an unknown codec name in settings
            raise ReadError(os.fspath(path), str(e)) from e

    def write_text(self, path: PathArg, text: str) -> None:
        """
        Encodes `text` and writes it, creating or truncating the file.

        Raises:
            WriteError: on permission errors, a missing parent directory, a full disk,
                or text the configured codec cannot encode.
        """
        try:
            data = text.encode(settings.TEXT_ENCODING)
        except (UnicodeEncodeError, LookupError) as e:
            # e.g. lone surrogates, or characters the configured codec cannot represent
            raise WriteError(os.fspath(path), str(e)) from e

        try:
            self.store.write_bytes(path, data)
        except OSError as e:
            raise WriteError(os.fspath(path), e.strerror or str(e)) from e

# Singleton Instance for easy import
text_io = TextIOService()

def read_text(path: PathArg) -> str:
    return text_io.read_text(path)

def write_text(path: PathArg, text: str) -> None:
    text_io.write_text(path, text)
