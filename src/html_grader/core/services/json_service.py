import json
from typing import Any


def to_json(data: Any, indent: int = 4, ensure_ascii: bool = False) -> str:
    """
    Convert Python object to JSON string.

    Args:
        data: Python object (dict, list, etc.)
        indent: Indentation level for pretty-printing (default: 4)
        ensure_ascii: If True, escape non-ASCII chars (default: False)

    Returns:
        str: JSON string, dict keys in insertion order
    """
    return json.dumps(data, ensure_ascii=ensure_ascii, indent=indent)


def read_json_file(path) -> Any:
    """Reads and decodes a whole JSON file. Decoding errors propagate."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
