"""
Helpers for raw bytes.
"""

import logging
from typing import Optional, Union

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def utf8_string(data: BytesLike) -> Optional[str]:
    """Decode data as UTF-8, or return None if it is not valid UTF-8."""
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        logger.debug("Bytes are not valid UTF-8: %s", e)
        return None


def hex_string(data: BytesLike) -> str:
    """
    Lowercase hex dump with two digits per byte and no separators.

    >>> hex_string(b"\\x00\\xffA")
    '00ff41'
    """
    return bytes(data).hex()
