"""
Configuration Management for signedjar
======================================

Configuration for where the signing key comes from and how rejected cookies
are reported, plus loaders for dict and JSON sources.
"""

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

from . import json_utils
from .error_handling import SignedJarConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class SigningConfig:
    """Configuration for signing key management and rejection logging."""

    key_file: str = "./signedjar.key"
    use_in_memory_key: bool = False
    generate_missing_key: bool = True
    log_rejections: bool = True

    def __post_init__(self):
        """Validate signing configuration."""
        if not self.use_in_memory_key and not str(self.key_file).strip():
            raise ValueError("key_file must be set unless use_in_memory_key is enabled")

        self.key_file = str(self.key_file)

        key_type = "in-memory" if self.use_in_memory_key else "persistent"
        logger.debug(
            f"Signing configured: key_type={key_type}, key_file={self.key_file}, "
            f"generate_missing={self.generate_missing_key}, "
            f"log_rejections={self.log_rejections}"
        )


def load_config_from_dict(data: Dict[str, Any]) -> SigningConfig:
    """
    Build a SigningConfig from a plain dictionary.

    Raises:
        SignedJarConfigurationError: On unknown keys or invalid values
    """
    known = {f.name for f in fields(SigningConfig)}
    unknown = set(data) - known
    if unknown:
        raise SignedJarConfigurationError(
            f"Unknown configuration keys: {sorted(unknown)}",
            {"known_keys": sorted(known)},
        )

    try:
        return SigningConfig(**data)
    except (TypeError, ValueError) as e:
        raise SignedJarConfigurationError(f"Invalid configuration: {e}") from e


def load_config_from_json(path: Union[str, Path]) -> SigningConfig:
    """Load a SigningConfig from a JSON file."""
    path = Path(path)
    try:
        data = json_utils.loads(path.read_bytes())
    except OSError as e:
        raise SignedJarConfigurationError(
            f"Cannot read configuration file: {e}", {"path": str(path)}
        ) from e
    except ValueError as e:
        raise SignedJarConfigurationError(
            f"Invalid JSON in configuration file: {e}", {"path": str(path)}
        ) from e

    if not isinstance(data, dict):
        raise SignedJarConfigurationError(
            "Configuration file must contain a JSON object", {"path": str(path)}
        )

    logger.debug(f"Loaded configuration from {path}")
    return load_config_from_dict(data)


def save_config_to_json(config: SigningConfig, path: Union[str, Path]) -> None:
    """Write a SigningConfig to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json_utils.dumps(asdict(config), sort_keys=True, indent=True))
    logger.debug(f"Saved configuration to {path}")
