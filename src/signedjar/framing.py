"""
Signed Value Framing
====================

Fixed-width framing for authenticated values::

    framed = base64(HMAC-SHA256(key, value)) ++ value

The encoded tag is always ``BASE64_DIGEST_LEN`` ASCII characters, so the split
point is a constant offset and no delimiter is ever searched for. Text values
are framed over their UTF-8 encoding.
"""

import base64
import binascii
import hashlib
import hmac
import logging
from typing import Tuple

from .error_handling import BadDigestEncodingError, MalformedFramingError

logger = logging.getLogger(__name__)

# Keep these in sync: 32 raw bytes encode to 44 base64 characters (one "=").
KEY_LEN = 32
DIGEST_LEN = 32
BASE64_DIGEST_LEN = 44


def compute_tag(key: bytes, value: bytes) -> bytes:
    """Return the raw HMAC-SHA256 tag of ``value`` under ``key``."""
    return hmac.new(key, value, hashlib.sha256).digest()


def encode_tag(tag: bytes) -> bytes:
    """Encode a raw tag as its fixed-width base64 form."""
    return base64.b64encode(tag)


def decode_tag(encoded: bytes) -> bytes:
    """
    Decode a fixed-width tag segment back into raw tag bytes.

    Only the canonical encoding of exactly ``DIGEST_LEN`` bytes is accepted.
    Python's decoder tolerates non-zero trailing bits, which would let two
    distinct segments decode to the same tag, so the result is re-encoded and
    compared.

    Args:
        encoded: The first ``BASE64_DIGEST_LEN`` bytes of a framed value

    Returns:
        The raw tag bytes

    Raises:
        BadDigestEncodingError: If the segment is not a canonical encoding
    """
    if len(encoded) != BASE64_DIGEST_LEN:
        raise BadDigestEncodingError("bad base64 digest")

    try:
        tag = base64.b64decode(encoded, validate=True)
    except binascii.Error:
        raise BadDigestEncodingError("bad base64 digest") from None

    if len(tag) != DIGEST_LEN or base64.b64encode(tag) != encoded:
        raise BadDigestEncodingError("bad base64 digest")
    return tag


def is_continuation_byte(byte: int) -> bool:
    """True for UTF-8 continuation bytes (``0b10xxxxxx``)."""
    return (byte & 0xC0) == 0x80


def is_split_boundary(framed: bytes, text: bool) -> bool:
    """
    Check that ``framed`` can be split at ``BASE64_DIGEST_LEN``.

    Args:
        framed: The framed value as bytes
        text: Whether ``framed`` is the UTF-8 encoding of a string, in which
            case the offset must not fall inside a multi-byte character

    Returns:
        True if slicing at the offset is valid
    """
    if len(framed) < BASE64_DIGEST_LEN:
        return False
    if text and len(framed) > BASE64_DIGEST_LEN:
        return not is_continuation_byte(framed[BASE64_DIGEST_LEN])
    return True


def split_framed(framed: bytes, text: bool = False) -> Tuple[bytes, bytes]:
    """
    Split a framed value into ``(encoded_tag, value)``.

    Raises:
        MalformedFramingError: If the split point is not a valid boundary
    """
    if not is_split_boundary(framed, text):
        raise MalformedFramingError("missing or invalid digest")
    return framed[:BASE64_DIGEST_LEN], framed[BASE64_DIGEST_LEN:]


def frame(key: bytes, value: bytes) -> bytes:
    """Prepend the encoded tag of ``value`` to ``value``."""
    return encode_tag(compute_tag(key, value)) + value
