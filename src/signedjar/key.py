"""
Master Key Handling
===================

A ``Key`` holds 64 bytes of master key material. The first 32 bytes sign
values; the last 32 are reserved for an encryption layer.

Keys are either generated in memory or persisted to a key file with
owner-only permissions, mirroring how a signing key is usually kept next to
the data it protects.
"""

import logging
import secrets
from pathlib import Path
from typing import Optional, Union

from .config import SigningConfig
from .error_handling import KeyFileError, KeyLengthError, with_error_handling
from .framing import KEY_LEN

logger = logging.getLogger(__name__)

MASTER_KEY_LEN = 64


class Key:
    """64-byte master key split into signing and encryption halves."""

    def __init__(self, master: bytes):
        if len(master) != MASTER_KEY_LEN:
            raise KeyLengthError(
                f"Master key must be {MASTER_KEY_LEN} bytes",
                {"length": len(master)},
            )
        self._master = bytes(master)

    @classmethod
    def from_bytes(cls, key: bytes) -> "Key":
        """
        Create a key from at least 64 bytes of key material.

        Only the first 64 bytes are used.

        Raises:
            KeyLengthError: If fewer than 64 bytes are supplied
        """
        if len(key) < MASTER_KEY_LEN:
            raise KeyLengthError(
                f"Key material too short: need at least {MASTER_KEY_LEN} bytes",
                {"length": len(key)},
            )
        return cls(key[:MASTER_KEY_LEN])

    @classmethod
    def generate(cls) -> "Key":
        """Generate a random key."""
        return cls(secrets.token_bytes(MASTER_KEY_LEN))

    @property
    def master(self) -> bytes:
        return self._master

    @property
    def signing(self) -> bytes:
        """The 32-byte signing key."""
        return self._master[:KEY_LEN]

    @property
    def encryption(self) -> bytes:
        """The 32-byte encryption key."""
        return self._master[KEY_LEN:]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return secrets.compare_digest(self._master, other._master)

    def __hash__(self) -> int:
        return hash(self._master)

    def __repr__(self) -> str:
        return "Key(<redacted>)"


@with_error_handling(KeyFileError)
def _read_key_file(key_file_path: Path) -> Key:
    key = key_file_path.read_bytes()
    if len(key) < MASTER_KEY_LEN:
        raise KeyFileError(
            f"Key file holds {len(key)} bytes, need {MASTER_KEY_LEN}",
            {"key_file": str(key_file_path)},
        )
    logger.debug(f"Loaded signing key from {key_file_path}")
    return Key.from_bytes(key)


@with_error_handling(KeyFileError)
def _write_key_file(key_file_path: Path, key: Key) -> None:
    key_file_path.parent.mkdir(parents=True, exist_ok=True)
    key_file_path.write_bytes(key.master)

    # Owner read/write only
    try:
        key_file_path.chmod(0o600)
    except OSError as e:
        logger.warning(f"Failed to set restrictive permissions on key file: {e}")

    logger.info(f"Generated new signing key: {key_file_path}")


def load_or_generate_key(config: Optional[SigningConfig] = None) -> Key:
    """
    Load the master key described by ``config``, generating it if allowed.

    Args:
        config: Signing configuration (defaults to ``SigningConfig()``)

    Returns:
        The loaded or newly generated Key

    Raises:
        KeyFileError: If the key file is missing and generation is disabled,
            or the file cannot be read or written
    """
    config = config or SigningConfig()

    if config.use_in_memory_key:
        logger.info("Using in-memory signing key (not persistent)")
        return Key.generate()

    key_file_path = Path(config.key_file)
    if key_file_path.exists():
        return _read_key_file(key_file_path)

    if not config.generate_missing_key:
        raise KeyFileError(
            f"Key file not found: {key_file_path}",
            {"key_file": str(key_file_path)},
        )

    key = Key.generate()
    _write_key_file(key_file_path, key)
    return key


def coerce_signing_key(key: Union[Key, bytes]) -> bytes:
    """
    Return the 32-byte signing key from a ``Key`` or raw bytes.

    Raises:
        KeyLengthError: If raw bytes are not exactly ``KEY_LEN`` long
    """
    if isinstance(key, Key):
        return key.signing

    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise TypeError(f"Signing key must be bytes or Key, not {type(key).__name__}")

    key = bytes(key)
    if len(key) != KEY_LEN:
        raise KeyLengthError(
            f"Signing key must be {KEY_LEN} bytes", {"length": len(key)}
        )
    return key
