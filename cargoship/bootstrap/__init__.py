"""
bootstrap/ - Configuration and entry points
"""

from .config import (
    CargoShipConfig,
    LoggingConfig,
    policy_from_env,
)

from .entrypoints import (
    setup_logging,
    run_demo,
    cli_main,
)

__all__ = [
    # Config
    "CargoShipConfig",
    "LoggingConfig",
    "policy_from_env",
    # Entry points
    "setup_logging",
    "run_demo",
    "cli_main",
]
