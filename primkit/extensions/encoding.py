"""
JSON encoding shortcuts and readable decode-error descriptions.

**Conceptual**: json_data / json_string return None instead of raising when
an object cannot be encoded, for call sites that treat "no JSON" as a normal
outcome. Dataclass instances are converted with dataclasses.asdict first.

decoding_error_description turns the assortment of exceptions a decode step
can raise (malformed JSON, missing key, wrong type) into one log-friendly line.
"""

import json
import logging
from dataclasses import asdict, is_dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)


def _to_jsonable(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    return obj


def json_string(obj: Any) -> Optional[str]:
    """
    Encode obj as a JSON string, or return None if it cannot be encoded.

    Args:
        obj: Any json-serializable value or dataclass instance.

    Returns:
        Compact JSON text, or None.
    """
    try:
        return json.dumps(_to_jsonable(obj), ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        logger.debug("Could not encode %s as JSON: %s", type(obj).__name__, e)
        return None


def json_data(obj: Any) -> Optional[bytes]:
    """Like json_string, but UTF-8 encoded bytes."""
    text = json_string(obj)
    return text.encode("utf-8") if text is not None else None


def decoding_error_description(error: Exception) -> str:
    """
    One-line description of a decoding failure.

    Format: "[Decoding Error] <where>] => <message>", where <where> is the
    line/column for malformed JSON, the key for a missing key, or "unknown".

    >>> try:
    ...     json.loads('{"a": }')
    ... except json.JSONDecodeError as e:
    ...     decoding_error_description(e)
    '[Decoding Error] line 1 column 7] => Expecting value'
    """
    key = "unknown"
    if isinstance(error, json.JSONDecodeError):
        key = f"line {error.lineno} column {error.colno}"
        message = error.msg
    elif isinstance(error, KeyError):
        key = str(error.args[0]) if error.args else key
        message = f"key {key} not found"
    elif isinstance(error, TypeError):
        message = f"type mismatch: {error}"
    elif isinstance(error, ValueError):
        message = f"value not found or invalid: {error}"
    else:
        message = f"unknown decoding error: {error}"
    return f"[Decoding Error] {key}] => {message}"
