"""
Package configuration.

Controls the default range for randomized vectors and the RNG seed.
All settings can be overridden via environment variables.
"""

import logging
import os
import random
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)


_ENV_PARSERS = {
    "VECTOR2D_RANDOM_LOW": float,
    "VECTOR2D_RANDOM_HIGH": float,
    "VECTOR2D_SEED": int,
}


def _env_value(name: str, default):
    # Malformed values fall back to the default; validate() reports them
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return _ENV_PARSERS[name](raw)
    except ValueError:
        return default


def _env_errors() -> list[str]:
    errors = []
    for name, parse in _ENV_PARSERS.items():
        raw = os.getenv(name)
        if raw is None or raw == "":
            continue
        try:
            parse(raw)
        except ValueError:
            errors.append(f"{name} is not a valid {parse.__name__}: {raw!r}")
    return errors


@dataclass
class VectorConfig:
    """Configuration for randomized vector components."""

    # Inclusive range used when randomize()/random() get no bounds
    random_low: float = field(default_factory=lambda: _env_value("VECTOR2D_RANDOM_LOW", 0))
    random_high: float = field(default_factory=lambda: _env_value("VECTOR2D_RANDOM_HIGH", 100))

    # None means seed from system entropy
    seed: Optional[int] = field(default_factory=lambda: _env_value("VECTOR2D_SEED", None))

    @classmethod
    def from_env(cls) -> "VectorConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors.

        Includes environment variables that could not be parsed and were
        replaced by their defaults.
        """
        errors = _env_errors()
        if self.random_low > self.random_high:
            errors.append(
                f"VECTOR2D_RANDOM_LOW ({self.random_low}) is greater than "
                f"VECTOR2D_RANDOM_HIGH ({self.random_high})"
            )
        return errors


# Singleton config and RNG
_config: Optional[VectorConfig] = None
_rng: Optional[random.Random] = None


def get_config() -> VectorConfig:
    """Get the global configuration."""
    global _config
    if _config is None:
        _config = VectorConfig.from_env()
        for error in _config.validate():
            logger.warning("Invalid vector2d config: %s", error)
    return _config


def set_config(config: VectorConfig) -> None:
    """
    Replace the global configuration.

    The shared RNG is rebuilt on next use so the new seed takes effect.
    """
    global _config, _rng
    _config = config
    _rng = None


def reset_config() -> None:
    """Drop the cached config and RNG; both are rebuilt from the environment."""
    global _config, _rng
    _config = None
    _rng = None


def get_rng() -> random.Random:
    """Get the shared random number generator."""
    global _rng
    if _rng is None:
        seed_value = get_config().seed
        logger.debug("Creating RNG (seed=%s)", seed_value)
        _rng = random.Random(seed_value)
    return _rng


def seed(value: Optional[int]) -> None:
    """Reseed the shared RNG, for reproducible runs and tests."""
    logger.debug("Reseeding RNG (seed=%s)", value)
    get_rng().seed(value)
