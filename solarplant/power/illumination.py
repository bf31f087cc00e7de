"""Incidence angle between the light source and a panel setup."""

import numpy as np

from solarplant.power.light_source import LightSource
from solarplant.power.panel_setup import PanelSetup


def illumination_angle(setup: PanelSetup, source: LightSource) -> float:
    """Angle of incidence of the source light on a setup.

    Simplified 1D model. Setups tilted to negative angles use the
    mirrored form; both forms agree at a mount angle of 0.

    Args:
        setup: Panel setup (not modified)
        source: Light source (not modified)

    Returns:
        Incidence angle (rad)
    """
    if setup.angle < 0:
        return np.pi / 2 - source.angle + setup.angle
    return np.pi / 2 + source.angle - setup.angle
