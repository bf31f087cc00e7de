"""Solar plant power model."""

from solarplant.power.panel import Panel
from solarplant.power.panel_setup import PanelSetup
from solarplant.power.light_source import LightSource
from solarplant.power.illumination import illumination_angle
from solarplant.power.plant import PLANT_SLOTS, Plant, SlotIndexError, SlotReport
from solarplant.power.reporting import LoggingReporter, NullReporter, Reporter

__all__ = [
    "Panel",
    "PanelSetup",
    "LightSource",
    "illumination_angle",
    "PLANT_SLOTS",
    "Plant",
    "SlotIndexError",
    "SlotReport",
    "LoggingReporter",
    "NullReporter",
    "Reporter",
]
