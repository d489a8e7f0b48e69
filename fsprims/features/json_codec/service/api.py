import logging
from typing import Any, Optional
from fsprims.core.config.settings import settings
from fsprims.core.common.errors import UnsupportedValueError
from fsprims.core.shared_types import PathArg
from fsprims.features.text_io.service.api import TextIOService, text_io
from ..domain.interfaces import IJSONCodec
from ..domain.models import is_json_object
from ..data.std_codec import StdJSONCodec

logger = logging.getLogger(__name__)

class JSONCodecService:
    """
    Facade for the JSON feature.
    Parses and serializes values, and uses TextIO to move the text to and from disk.
    """
    def __init__(self, codec: Optional[IJSONCodec] = None, text: Optional[TextIOService] = None):
        self.codec = codec or StdJSONCodec()
        self.text = text or text_io

    def parse(self, text: str) -> Any:
        """
        Parses JSON text. The result is whatever the text describes;
        no check is made against the type the caller expects.

        Raises:
            ParseError: if `text` is not valid JSON.
        """
        return self.codec.decode(text)

    def stringify(self, value: Any) -> str:
        """
        Returns the text form of `value`:
        - dict / list -> JSON-encoded.
        - str -> returned unchanged, it is treated as already-final text (no quotes added).

        Raises:
            UnsupportedValueError: for any other value (numbers, bools, None, ...).
        """
        if isinstance(value, str):
            return value
        if is_json_object(value):
            return self.codec.encode(value, indent=settings.JSON_INDENT)
        raise UnsupportedValueError(value)

    def read_json(self, path: PathArg) -> Any:
        """
        Reads a file and parses it.
        ReadError and ParseError are raised as-is, whichever happens first.
        """
        return self.parse(self.text.read_text(path))

    def write_json(self, path: PathArg, value: Any) -> None:
        """
        Serializes `value` (see `stringify`) and writes it to `path`.
        The value is validated before the file is opened, so a rejected
        value never creates or truncates the target.
        """
        content = self.stringify(value)
        self.text.write_text(path, content)
        logger.debug(f"Wrote JSON ({type(value).__name__}) to {path}")

# Singleton Instance for easy import
json_codec = JSONCodecService()

def parse(text: str) -> Any:
    return json_codec.parse(text)

def stringify(value: Any) -> str:
    return json_codec.stringify(value)

def read_json(path: PathArg) -> Any:
    return json_codec.read_json(path)

def write_json(path: PathArg, value: Any) -> None:
    json_codec.write_json(path, value)
