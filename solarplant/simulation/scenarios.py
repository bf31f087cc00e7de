"""Demo plant configurations."""

from typing import Optional

import numpy as np

from solarplant.power.panel import Panel
from solarplant.power.panel_setup import PanelSetup
from solarplant.power.plant import PLANT_SLOTS, Plant
from solarplant.power.reporting import Reporter


def demo_test_setup(reporter: Optional[Reporter] = None) -> PanelSetup:
    """Setup tilted to -pi/2 with a 10x10 panel shrunk to 2x3."""
    setup = PanelSetup(-np.pi / 2, Panel(10, 10))
    setup.set_panel_elements(2, 3, reporter=reporter)
    return setup


def uniform_plant(setup: PanelSetup, reporter: Optional[Reporter] = None) -> Plant:
    """Plant with every slot holding a copy of setup."""
    plant = Plant(reporter=reporter)
    for index in range(PLANT_SLOTS):
        plant.set_panel_setup(setup, index)
    return plant


def fan_plant(reporter: Optional[Reporter] = None) -> Plant:
    """Plant arranged for a flatter day profile.

    Panels face the morning sun on one side, the evening sun on the
    other, with two in the middle::

        \\ \\ \\ \\ _ _ / / / /
    """
    plant = Plant(reporter=reporter)
    for index in (0, 1, 2, 3):
        plant.set_panel_setup(PanelSetup(np.pi / 4), index)
        plant.resize_panel_at(index, 10, 10)
    for index in (4, 5):
        plant.set_panel_setup(PanelSetup(np.pi / 2), index)
    for index in (6, 7, 8, 9):
        plant.set_panel_setup(PanelSetup(-np.pi / 4), index)
    return plant
