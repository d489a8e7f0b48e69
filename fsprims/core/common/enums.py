# File: fsprims/core/common/enums.py

from enum import Enum, unique

@unique
class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"
