from typing import Dict, List, Union

JSONScalar = Union[str, int, float, bool, None]
JSONLike = Union[JSONScalar, List["JSONLike"], Dict[str, "JSONLike"]]

# What counts as a JSON "object" on the write path: containers get encoded,
# plain strings are written as-is, everything else is rejected.
OBJECT_TYPES = (dict, list)

def is_json_object(value: object) -> bool:
    return isinstance(value, OBJECT_TYPES)
