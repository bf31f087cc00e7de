"""Sweep and reporting configuration.

All driver parameters are defined here and can be overridden by the
command line.
"""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np


@dataclass
class SweepConfig:
    """Light source sweep parameters."""
    start_angle: float = -np.pi / 2  # First source angle [rad]
    stop_angle: float = np.pi / 2  # Sweep ends once the source reaches this [rad]
    step: float = np.pi / 16  # Source increment per step [rad]


@dataclass
class ReportingConfig:
    """Reporting parameters."""
    log_level: str = "INFO"
    trace_reference: bool = True  # Report a single reference setup next to the plant


@dataclass
class Config:
    """Root configuration."""
    sweep: SweepConfig = field(default_factory=SweepConfig)
    reporting: ReportingConfig = field(default_factory=ReportingConfig)


# Global state
_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance."""
    global _config

    if _config is None:
        _config = Config()

    return _config


def set_config(config: Config) -> None:
    """Set global configuration instance."""
    global _config
    _config = config


def reset_config() -> Config:
    """Restore the default configuration."""
    global _config
    _config = Config()
    return _config
