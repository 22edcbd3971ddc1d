"""
signedjar - Tamper-evident cookie values with HMAC-SHA256.

This library signs cookie values so that later readers can detect tampering
or forgery. Values stay readable: a signed value is the base64 HMAC tag
followed directly by the plaintext.

Key Features:
- Fixed-width framing, split by offset rather than by separator
- Constant-time tag comparison
- Verification that rejects malformed input instead of raising
- A signed view over any cookie store, plus an in-memory jar with change tracking

Quick Start:
    >>> from signedjar import CookieJar, Cookie, Key
    >>>
    >>> key = Key.generate()
    >>> jar = CookieJar()
    >>> jar.signed(key).add(Cookie("session", "user=42"))
    >>> jar.signed(key).get("session").value
    'user=42'
"""

from .config import SigningConfig, load_config_from_dict, load_config_from_json
from .framing import BASE64_DIGEST_LEN, KEY_LEN
from .jar import SignedJar, create_signed_jar
from .key import Key, load_or_generate_key
from .signing import ValueSigner, sign, verify
from .store import Cookie, CookieJar, CookieStore

__version__ = "0.1.0"

__all__ = [
    # Signing
    "ValueSigner",
    "sign",
    "verify",
    "BASE64_DIGEST_LEN",
    "KEY_LEN",
    # Keys
    "Key",
    "load_or_generate_key",
    # Stores
    "Cookie",
    "CookieJar",
    "CookieStore",
    "SignedJar",
    "create_signed_jar",
    # Configuration
    "SigningConfig",
    "load_config_from_dict",
    "load_config_from_json",
    # Version info
    "__version__",
]
