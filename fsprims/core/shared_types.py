from os import PathLike
from typing import Union

# Anything the os / open() APIs accept as a path
PathArg = Union[str, PathLike]
