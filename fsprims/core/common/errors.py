# File: fsprims/core/common/errors.py

from typing import Optional


class FsPrimsError(Exception):
    """
    Base class for every error raised by fsprims.
    """


class ReadError(FsPrimsError):
    """
    Reading a file failed (missing, unreadable, is a directory, device error).
    """
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Read failed for {path}"
        super().__init__(f"{message}: {reason}" if reason else message)


class WriteError(FsPrimsError):
    """
    Writing a file failed. Nothing is rolled back, the target may be truncated.
    """
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Write failed for {path}"
        super().__init__(f"{message}: {reason}" if reason else message)


class ParseError(FsPrimsError, ValueError):
    """
    Text was not syntactically valid JSON.
    Keeps the position of the failure and the offending text for diagnostics.
    """
    def __init__(self, reason: str, text: Optional[str] = None, lineno: int = 0, colno: int = 0):
        self.reason = reason
        self.text = text
        self.lineno = lineno
        self.colno = colno
        super().__init__(f"Invalid JSON: {reason}")


class UnsupportedValueError(FsPrimsError, TypeError):
    """
    A value handed to the JSON writer is neither an object (dict/list) nor a string.
    """
    def __init__(self, value: object, reason: Optional[str] = None):
        self.value_type = type(value).__name__
        reason = reason or "expected dict, list or str"
        super().__init__(f"Cannot serialize value of type {self.value_type}: {reason}")


class TraversalPathError(FsPrimsError):
    """
    A status, listing or visitor failure for one path during a walk.
    Never raised to the caller of walk_files; it is logged and dropped.
    """
    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Error reading path {path}: {cause}")
