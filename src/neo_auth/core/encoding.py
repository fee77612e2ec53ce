"""Canonical byte encoding for payloads that get signed."""

import json
from typing import Any


def canonical_json(obj: Any) -> bytes:
    """Encode ``obj`` as canonical JSON.

    Keys are sorted, separators are compact and the output is UTF-8, so
    equal payloads always produce identical bytes.
    """
    return json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False
    ).encode("utf-8")
