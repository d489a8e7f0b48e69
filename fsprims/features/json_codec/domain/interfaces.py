from abc import ABC, abstractmethod
from typing import Any, Optional
from .models import JSONLike

class IJSONCodec(ABC):
    """
    Contract for converting between JSON text and Python values.
    """
    @abstractmethod
    def decode(self, text: str) -> JSONLike:
        """
        Parses strict JSON text.
        Raises ParseError on invalid syntax.
        """
        pass

    @abstractmethod
    def encode(self, value: Any, indent: Optional[int] = None) -> str:
        """
        Serializes a container value to JSON text.
        Raises UnsupportedValueError if something inside cannot be encoded.
        """
        pass
