"""
JSON serialization utilities with reference support.

Values written to a cache file may contain themselves, or share containers.
Every container is written once; later occurrences of the same object become
a reference marker {"$ref": "#<json-pointer>"} pointing at the first one, and
markers are turned back into shared objects on read.
"""

import json
import logging
import re
from datetime import datetime
from typing import Any

from pydantic import BaseModel

from ..exceptions import CacheParseError, CacheSerializationError

logger = logging.getLogger("JSONSerde")

REF_KEY = "$ref"
REF_PREFIX = "#"

# "$ref", "$$ref", ...: the only keys that could be read back as a marker
_REF_LIKE_KEY = re.compile(r"\$+ref")


class _Ref:
    """Unresolved reference marker found while decoding."""

    __slots__ = ("pointer",)

    def __init__(self, pointer: str):
        self.pointer = pointer


def _escape_token(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _unescape_token(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


def _escape_key(key: str) -> str:
    return "$" + key if _REF_LIKE_KEY.fullmatch(key) else key


def _unescape_key(key: str) -> str:
    if key.startswith("$$") and _REF_LIKE_KEY.fullmatch(key):
        return key[1:]
    return key


def serialize_for_json(obj: Any) -> Any:
    """
    Convert a Python value into plain JSON data.

    BaseModel instances are dumped in JSON mode, datetimes become ISO strings
    and tuples become lists. A container seen earlier in the walk is replaced
    by a reference marker to the place where it was first written.
    """
    # pointer and owner are kept together so dumped temporaries stay alive
    # and their ids cannot be reused during the walk
    seen: dict[int, tuple[str, Any]] = {}
    return _serialize(obj, "", seen)


def _serialize(obj: Any, pointer: str, seen: dict[int, tuple[str, Any]]) -> Any:
    if isinstance(obj, BaseModel):
        obj = obj.model_dump(mode="json")
    if isinstance(obj, datetime):
        return obj.isoformat()
    if not isinstance(obj, (dict, list, tuple)):
        return obj

    marker = id(obj)
    if marker in seen:
        return {REF_KEY: REF_PREFIX + seen[marker][0]}
    seen[marker] = (pointer, obj)

    if isinstance(obj, dict):
        result = {}
        for key, value in obj.items():
            if not isinstance(key, str):
                raise CacheSerializationError(
                    f"Object keys must be strings, got {type(key).__name__}"
                )
            child = f"{pointer}/{_escape_token(key)}"
            result[_escape_key(key)] = _serialize(value, child, seen)
        return result

    return [_serialize(item, f"{pointer}/{index}", seen) for index, item in enumerate(obj)]


def deserialize_from_json(data: Any) -> Any:
    """Rebuild a value written by serialize_for_json, restoring references."""
    root = _decode(data)
    if isinstance(root, _Ref):
        raise CacheParseError("Document root cannot be a reference")
    _resolve_refs(root)
    return root


def _decode(data: Any) -> Any:
    if isinstance(data, dict):
        if len(data) == 1 and isinstance(data.get(REF_KEY), str):
            return _Ref(data[REF_KEY])
        return {_unescape_key(key): _decode(value) for key, value in data.items()}
    if isinstance(data, list):
        return [_decode(item) for item in data]
    return data


def _resolve_refs(root: Any) -> None:
    # decoded data is a tree until refs are patched, so walking only the
    # decoded children always terminates
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, dict):
            items = list(node.items())
        elif isinstance(node, list):
            items = list(enumerate(node))
        else:
            continue

        for slot, child in items:
            if isinstance(child, _Ref):
                node[slot] = _lookup_pointer(root, child.pointer)
            elif isinstance(child, (dict, list)):
                stack.append(child)


def _lookup_pointer(root: Any, pointer: str) -> Any:
    """Find the container a reference points to, starting from the root."""
    if not pointer.startswith(REF_PREFIX):
        raise CacheParseError(f"Invalid reference: {pointer!r}")

    path = pointer[len(REF_PREFIX) :]
    if not path:
        return root
    if not path.startswith("/"):
        raise CacheParseError(f"Invalid reference: {pointer!r}")

    target = root
    for token in path[1:].split("/"):
        token = _unescape_token(token)
        try:
            if isinstance(target, dict):
                target = target[token]
            elif isinstance(target, list):
                target = target[int(token)]
            else:
                raise CacheParseError(f"Unresolvable reference: {pointer!r}")
        except (KeyError, IndexError, ValueError) as e:
            raise CacheParseError(f"Unresolvable reference: {pointer!r}") from e

    if isinstance(target, _Ref) or not isinstance(target, (dict, list)):
        raise CacheParseError(f"Reference does not point at a container: {pointer!r}")
    return target


def to_json_string(data: Any) -> str:
    """Convert data to a JSON string, resolving repeated containers to references."""
    try:
        return json.dumps(serialize_for_json(data), ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as e:
        raise CacheSerializationError(f"Value is not JSON serializable: {e}") from e
    except RecursionError as e:
        raise CacheSerializationError("Value is nested too deeply") from e


def from_json_string(json_str: str) -> dict[str, Any]:
    """
    Convert JSON string to a cache map.

    Raises:
        CacheParseError: content is empty, malformed, not an object, or
            holds a reference that cannot be resolved, or is nested
            deeper than the interpreter can decode.
    """
    if not json_str.strip():
        raise CacheParseError("Empty content")

    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        logger.debug(f"Failed to parse JSON: {e}")
        raise CacheParseError(str(e)) from e
    except RecursionError as e:
        raise CacheParseError("Document is nested too deeply") from e

    if not isinstance(data, dict):
        raise CacheParseError(
            f"Expected a JSON object at top level, got {type(data).__name__}"
        )

    try:
        return deserialize_from_json(data)
    except RecursionError as e:
        raise CacheParseError("Document is nested too deeply") from e
