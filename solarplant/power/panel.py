"""Solar panel built from fixed-size elements."""

from dataclasses import dataclass


# Per-element constants
ELEMENT_WIDTH_CM = 6.0
ELEMENT_HEIGHT_CM = 10.0
ELEMENT_POWER_W = 15.0

DEFAULT_WIDTH_UNITS = 20
DEFAULT_HEIGHT_UNITS = 30


@dataclass
class Panel:
    """Rectangular panel made of width_units x height_units elements.

    Unit counts are not validated. Zero or negative counts give zero
    or negative derived quantities.

    Attributes:
        width_units: Number of elements along the width
        height_units: Number of elements along the height
    """

    width_units: int = DEFAULT_WIDTH_UNITS
    height_units: int = DEFAULT_HEIGHT_UNITS

    @property
    def width_cm(self) -> float:
        """Panel width (cm)."""
        return self.width_units * ELEMENT_WIDTH_CM

    @property
    def height_cm(self) -> float:
        """Panel height (cm)."""
        return self.height_units * ELEMENT_HEIGHT_CM

    @property
    def area_cm2(self) -> float:
        """Panel area (cm^2)."""
        return self.width_cm * self.height_cm

    @property
    def max_power_w(self) -> float:
        """Rated power with light at normal incidence (W)."""
        return self.width_units * self.height_units * ELEMENT_POWER_W

    def resize_width(self, nelements: int) -> None:
        """Set the number of elements along the width."""
        self.width_units = nelements

    def resize_height(self, nelements: int) -> None:
        """Set the number of elements along the height."""
        self.height_units = nelements

    def copy(self) -> "Panel":
        """Return an independent copy of this panel."""
        return Panel(self.width_units, self.height_units)
