# File: fsprims/core/config/settings.py

import os
from typing import Optional


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


class Settings:
    # --- Text I/O ---
    TEXT_ENCODING: str = os.getenv("FSPRIMS_TEXT_ENCODING", "utf-8")
    # "replace" swaps malformed byte sequences for U+FFFD instead of failing
    DECODE_ERRORS: str = os.getenv("FSPRIMS_DECODE_ERRORS", "replace")

    # --- JSON ---
    # None keeps object output compact, like JSON.stringify without a space argument
    JSON_INDENT: Optional[int] = _optional_int(os.getenv("FSPRIMS_JSON_INDENT"))


settings = Settings()
