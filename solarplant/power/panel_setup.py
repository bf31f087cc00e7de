"""Mounted panel with a fixed tilt angle."""

from typing import Optional

import numpy as np

from solarplant.power.panel import Panel
from solarplant.power.reporting import Reporter, get_default_reporter


class PanelSetup:
    """A panel mounted at a fixed angle.

    The setup owns its own copy of the panel; the panel passed to the
    constructor is never shared.

    Attributes:
        angle: Mount angle (rad), no range enforced
        panel: The owned panel, mutable in place
    """

    def __init__(self, angle: float = 0.0, panel: Optional[Panel] = None):
        """Initialize panel setup.

        Args:
            angle: Mount angle (rad), default 0
            panel: Panel to copy into the setup, default 20x30 elements
        """
        self._angle = angle
        self._panel = panel.copy() if panel is not None else Panel()

    @property
    def angle(self) -> float:
        """Mount angle (rad)."""
        return self._angle

    def set_angle(self, angle: float) -> None:
        """Set the mount angle (rad)."""
        self._angle = angle

    @property
    def panel(self) -> Panel:
        """The owned panel. Resizing it changes this setup."""
        return self._panel

    def current_power(self, incidence_angle: float) -> float:
        """Calculate power output.

        Args:
            incidence_angle: Angle between light ray and panel normal (rad)

        Returns:
            Power in Watts, zero when the light comes from behind
        """
        cos_angle = float(np.cos(incidence_angle))
        if cos_angle > 0.0:
            return self._panel.max_power_w * cos_angle
        return 0.0

    def efficiency(self, incidence_angle: float) -> float:
        """Output as a percentage of rated power.

        Returns 0 for a panel with zero rated power or an undefined angle.
        """
        max_power = self._panel.max_power_w
        if max_power != 0 and np.cos(incidence_angle) > 0.0:
            return 100.0 * self.current_power(incidence_angle) / max_power
        return 0.0

    def set_panel_elements(
        self, nx: int, ny: int, reporter: Optional[Reporter] = None
    ) -> float:
        """Resize the owned panel and report its new area.

        Args:
            nx: Elements along the width
            ny: Elements along the height
            reporter: Sink for the area line (default reporter if None)

        Returns:
            New panel area (cm^2)
        """
        self._panel.resize_width(nx)
        self._panel.resize_height(ny)
        area = self._panel.area_cm2
        (reporter or get_default_reporter()).report_area(area)
        return area

    def copy(self) -> "PanelSetup":
        """Return an independent copy (panel included)."""
        return PanelSetup(self._angle, self._panel)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PanelSetup):
            return NotImplemented
        return self._angle == other._angle and self._panel == other._panel

    def __repr__(self) -> str:
        return f"PanelSetup(angle={self._angle!r}, panel={self._panel!r})"
