"""
bootstrap/config.py - Application configuration

Provides configuration from environment variables, dictionaries and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
import logging
import os

from ..containers.policy import (
    ContainerPolicy,
    DANGEROUS_LIQUID_RATIO,
    SAFE_LIQUID_RATIO,
    GAS_RESIDUE_FRACTION,
    DEFAULT_ID_PREFIX,
)
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(key, raw, "not a number") from None


def _env_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    return raw.lower() == "true"


def policy_from_env(env: Optional[Mapping[str, str]] = None) -> ContainerPolicy:
    """Build a ContainerPolicy from CARGOSHIP_* variables."""
    env = os.environ if env is None else env
    return ContainerPolicy(
        dangerous_liquid_ratio=_env_float(env, "CARGOSHIP_DANGEROUS_LIQUID_RATIO", DANGEROUS_LIQUID_RATIO),
        safe_liquid_ratio=_env_float(env, "CARGOSHIP_SAFE_LIQUID_RATIO", SAFE_LIQUID_RATIO),
        gas_residue_fraction=_env_float(env, "CARGOSHIP_GAS_RESIDUE", GAS_RESIDUE_FRACTION),
        id_prefix=env.get("CARGOSHIP_ID_PREFIX", DEFAULT_ID_PREFIX),
    )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    json_logs: bool = False

    def __post_init__(self):
        self.level = self.level.upper()
        if self.level not in LOG_LEVELS:
            raise ConfigurationError("logging.level", self.level, f"expected one of {LOG_LEVELS}")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "LoggingConfig":
        env = os.environ if env is None else env
        return cls(
            level=env.get("CARGOSHIP_LOG_LEVEL", "INFO"),
            format=env.get("CARGOSHIP_LOG_FORMAT", DEFAULT_LOG_FORMAT),
            json_logs=_env_bool(env, "CARGOSHIP_JSON_LOGS", False),
        )


@dataclass
class CargoShipConfig:
    """Root configuration."""

    environment: str = "development"
    debug: bool = False
    version: str = "0.1.0"

    policy: ContainerPolicy = field(default_factory=ContainerPolicy)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "CargoShipConfig":
        """Create configuration from environment variables."""
        env = os.environ if env is None else env
        return cls(
            environment=env.get("CARGOSHIP_ENVIRONMENT", "development"),
            debug=_env_bool(env, "CARGOSHIP_DEBUG", False),
            policy=policy_from_env(env),
            logging=LoggingConfig.from_env(env),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any], env: Optional[Mapping[str, str]] = None) -> "CargoShipConfig":
        """Environment configuration overridden by dictionary values."""
        config = cls.from_env(env)

        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = bool(data["debug"])

        if "policy" in data:
            values = config.policy.to_dict()
            for key, value in data["policy"].items():
                if key not in values:
                    logger.warning(f"Ignoring unknown policy setting: {key}")
                    continue
                values[key] = value
            config.policy = ContainerPolicy(**values)

        if "logging" in data:
            for key, value in data["logging"].items():
                if hasattr(config.logging, key):
                    setattr(config.logging, key, value)
                else:
                    logger.warning(f"Ignoring unknown logging setting: {key}")
            # Re-run level validation after overrides
            config.logging.__post_init__()

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "version": self.version,
            "policy": self.policy.to_dict(),
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "json_logs": self.logging.json_logs,
            },
        }
