"""
Value Signing and Verification
==============================

HMAC-SHA256 authentication for plaintext values. A signed value carries its
tag in front of the plaintext, so the data stays readable but cannot be
altered or forged without the key.

Usage:
    from signedjar.signing import ValueSigner

    signer = ValueSigner(key)
    framed = signer.sign("value")
    signer.verify(framed)   # -> "value"
    signer.verify("forged") # -> None

``verify`` only ever answers "authenticated plaintext" or ``None``. The reason
for a rejection is available through ``unsign`` for diagnostics, which raises
one of the ``VerificationError`` subclasses.
"""

import hmac
import logging
from typing import Optional, Union

from .error_handling import VerificationError, VerificationFailedError
from .framing import compute_tag, decode_tag, frame, split_framed
from .key import Key, coerce_signing_key

logger = logging.getLogger(__name__)

Value = Union[str, bytes]


class ValueSigner:
    """
    Signs values and verifies signed values with a fixed signing key.

    The key is checked once here and never re-checked per call. Instances hold
    no mutable state and can be shared freely.
    """

    def __init__(self, key: Union[Key, bytes]):
        """
        Initialize the signer.

        Args:
            key: A master ``Key`` (its signing half is used) or exactly 32 raw
                signing-key bytes

        Raises:
            KeyLengthError: If raw key bytes are not 32 bytes long
        """
        self._key = coerce_signing_key(key)

    def sign(self, value: Value) -> Value:
        """
        Prefix ``value`` with its encoded authentication tag.

        Args:
            value: Plaintext as str (framed over UTF-8) or bytes

        Returns:
            The framed value, of the same type as ``value``
        """
        if isinstance(value, str):
            raw = value.encode("utf-8", "surrogatepass")
            return frame(self._key, raw).decode("utf-8", "surrogatepass")
        return frame(self._key, bytes(value))

    def unsign(self, framed: Value) -> Value:
        """
        Verify ``framed`` and return its plaintext, raising on rejection.

        Raises:
            MalformedFramingError: Too short, or split inside a character
            BadDigestEncodingError: Tag segment is not a canonical encoding
            VerificationFailedError: Tag does not match the value
        """
        text = isinstance(framed, str)
        raw = framed.encode("utf-8", "surrogatepass") if text else bytes(framed)

        encoded_tag, value = split_framed(raw, text=text)
        tag = decode_tag(encoded_tag)

        if not hmac.compare_digest(compute_tag(self._key, value), tag):
            raise VerificationFailedError("value did not verify")

        if text:
            return value.decode("utf-8", "surrogatepass")
        return value

    def verify(self, framed: Value) -> Optional[Value]:
        """
        Return the authenticated plaintext of ``framed``, or None.

        Verification always succeeds for values produced by ``sign`` with the
        same key.
        """
        try:
            return self.unsign(framed)
        except VerificationError as e:
            logger.debug(f"Rejected signed value: {e}")
            return None


def sign(key: Union[Key, bytes], plaintext: Value) -> Value:
    """Sign ``plaintext`` with ``key``. See ``ValueSigner.sign``."""
    return ValueSigner(key).sign(plaintext)


def verify(key: Union[Key, bytes], framed: Value) -> Optional[Value]:
    """Verify ``framed`` with ``key``. See ``ValueSigner.verify``."""
    return ValueSigner(key).verify(framed)
