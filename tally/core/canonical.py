"""
Canonical serialization for accumulator snapshots.

Decimals are rendered as strings so no precision is lost and output is
byte-identical across runs.
"""

import json
from decimal import Decimal
from enum import Enum
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Convert nested dict/list/Decimal structures to canonical form.

    Rules:
    - dict keys sorted alphabetically
    - tuples converted to lists
    - Decimal converted to its string form
    - Enum converted to its value
    - objects with to_dict() are expanded
    """
    if hasattr(obj, "to_dict"):
        return canonicalize(obj.to_dict())
    if isinstance(obj, dict):
        return {k: canonicalize(obj[k]) for k in sorted(obj.keys())}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Decimal):
        return str(obj)
    return obj


def canonical_json_str(obj: Any, indent: Any = None) -> str:
    """
    Deterministic JSON string.

    Returns:
        JSON with sorted keys; compact unless indent is given
    """
    canon = canonicalize(obj)
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(canon, sort_keys=True, separators=separators, indent=indent, ensure_ascii=False)
