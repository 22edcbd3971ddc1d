"""
Signed Cookie Jar
=================

``SignedJar`` wraps a ``CookieStore`` and authenticates the cookies that pass
through it. Values are signed on the way in and verified on the way out, so
clients cannot tamper with or fabricate cookie values. The values themselves
remain visible in plaintext.

Example:
    >>> from signedjar import CookieJar, Cookie, Key
    >>> key = Key.generate()
    >>> jar = CookieJar()
    >>> jar.signed(key).add(Cookie("name", "value"))
    >>> jar.get("name").value != "value"
    True
    >>> jar.signed(key).get("name").value
    'value'
"""

import logging
from typing import Optional, Union

from .config import SigningConfig
from .key import Key, load_or_generate_key
from .signing import ValueSigner
from .store import Cookie, CookieStore

logger = logging.getLogger(__name__)


class SignedJar:
    """A view over a parent store that signs and verifies cookie values."""

    def __init__(
        self,
        parent: CookieStore,
        key: Union[Key, bytes],
        log_rejections: bool = True,
    ):
        """
        Initialize the signed jar.

        Args:
            parent: The store cookies are read from and written to
            key: Master ``Key`` or 32 raw signing-key bytes
            log_rejections: Log a warning when a stored cookie fails to verify
        """
        self.parent = parent
        self.log_rejections = log_rejections
        self._signer = ValueSigner(key)

    def _sign_cookie(self, cookie: Cookie) -> Cookie:
        return cookie.with_value(self._signer.sign(cookie.value))

    def verify(self, cookie: Cookie) -> Optional[Cookie]:
        """
        Verify ``cookie`` and return a copy carrying the plaintext value.

        Verification always succeeds for cookies signed by a ``SignedJar``
        with the same key.

        Returns:
            The authenticated cookie, or None if verification fails
        """
        value = self._signer.verify(cookie.value)
        if value is None:
            return None
        return cookie.with_value(value)

    def get(self, name: str) -> Optional[Cookie]:
        """
        Get the cookie named ``name`` from the parent and verify it.

        Returns:
            The authenticated cookie, or None if absent or not authentic
        """
        cookie = self.parent.get(name)
        if cookie is None:
            return None

        verified = self.verify(cookie)
        if verified is None and self.log_rejections:
            logger.warning(f"Signature verification failed for cookie {name!r}")
        return verified

    def add(self, cookie: Cookie):
        """Sign ``cookie`` and add it to the parent, recording the change."""
        self.parent.add(self._sign_cookie(cookie))

    def add_original(self, cookie: Cookie):
        """
        Sign ``cookie`` and seed the parent with it without recording a change.

        Intended for cookies received from a client's request.
        """
        self.parent.add_original(self._sign_cookie(cookie))

    def remove(self, cookie: Cookie):
        """
        Remove ``cookie`` from the parent.

        For correct removal, ``cookie`` must carry the same path and domain as
        the cookie that was set.
        """
        self.parent.remove(cookie)


def create_signed_jar(
    parent: CookieStore, config: Optional[SigningConfig] = None
) -> SignedJar:
    """
    Factory function to create a signed jar with a configured key.

    Args:
        parent: The store to wrap
        config: Signing configuration (defaults to ``SigningConfig()``)

    Returns:
        Configured SignedJar instance
    """
    config = config or SigningConfig()
    key = load_or_generate_key(config)
    return SignedJar(parent, key, log_rejections=config.log_rejections)
