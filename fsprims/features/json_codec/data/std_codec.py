import json
import re
from typing import Any, Optional
from fsprims.core.common.errors import ParseError, UnsupportedValueError
from ..domain.interfaces import IJSONCodec
from ..domain.models import JSONLike

# Surrogate code points cannot be encoded as UTF-8.
# The decoder already merges escaped pairs into one character.
_SURROGATE = re.compile(r"[\ud800-\udfff]")

def _escape_surrogate(match: "re.Match") -> str:
    return f"\\u{ord(match.group(0)):04x}"

def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")

class StdJSONCodec(IJSONCodec):
    """
    Strict JSON via the standard library `json` module.
    Output mirrors JSON.stringify: compact separators, non-ASCII left unescaped.
    """

    def decode(self, text: str) -> JSONLike:
        try:
            # NaN / Infinity are accepted by `json` by default but are not JSON
            return json.loads(text, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise ParseError(e.msg, text=text, lineno=e.lineno, colno=e.colno) from e
        except ValueError as e:
            raise ParseError(str(e), text=text) from e

    def encode(self, value: Any, indent: Optional[int] = None) -> str:
        separators = (",", ":") if indent is None else (",", ": ")
        try:
            text = json.dumps(
                value,
                ensure_ascii=False,
                allow_nan=False,
                indent=indent,
                separators=separators,
            )
        except (TypeError, ValueError) as e:
            # Non-serializable members, NaN, circular references
            raise UnsupportedValueError(value, str(e)) from e

        # Lone surrogates are written as \uXXXX escapes, like JSON.stringify does
        return _SURROGATE.sub(_escape_surrogate, text)
