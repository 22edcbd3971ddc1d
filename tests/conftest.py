"""
Shared fixtures for signedjar tests.
"""

import pytest

from signedjar import CookieJar, Key, ValueSigner

# SHA-256 of "Super secret!" passed through HKDF-SHA256. Values signed with it
# by other implementations are used as compatibility vectors.
COMPAT_KEY_BYTES = bytes(
    [
        89, 202, 200, 125, 230, 90, 197, 245, 166, 249, 34, 169, 135, 31, 20, 197,
        94, 154, 254, 79, 60, 26, 8, 143, 254, 24, 116, 138, 92, 225, 159, 60,
        157, 41, 135, 129, 31, 226, 196, 16, 198, 168, 134, 4, 42, 1, 196, 24,
        57, 103, 241, 147, 201, 185, 233, 10, 180, 170, 187, 89, 252, 137, 110, 107,
    ]
)
COMPAT_SIGNED_VALUE = "3tdHXEQ2kf6fxC7dWzBGmpSLMtJenXLKrZ9cHkSsl1w=Tamper-proof"


@pytest.fixture
def key():
    """A freshly generated master key."""
    return Key.generate()


@pytest.fixture
def zero_key():
    """32 zero bytes used as a raw signing key."""
    return bytes(32)


@pytest.fixture
def compat_key():
    """The 64-byte master key behind the compatibility vector."""
    return Key.from_bytes(COMPAT_KEY_BYTES)


@pytest.fixture
def signer(key):
    return ValueSigner(key)


@pytest.fixture
def jar():
    return CookieJar()
