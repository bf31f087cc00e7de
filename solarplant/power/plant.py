"""Solar plant made of a fixed number of panel setups."""

import operator
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from solarplant.power.illumination import illumination_angle
from solarplant.power.light_source import LightSource
from solarplant.power.panel_setup import PanelSetup
from solarplant.power.reporting import Reporter, get_default_reporter


# Number of setup slots in every plant
PLANT_SLOTS = 10


class SlotIndexError(IndexError):
    """Slot index outside 0..PLANT_SLOTS-1."""

    def __init__(self, index: int):
        super().__init__(f"slot index {index} out of range 0..{PLANT_SLOTS - 1}")
        self.index = index


@dataclass(frozen=True)
class SlotReport:
    """Diagnostic snapshot of one plant slot."""

    index: int
    angle: float
    area_cm2: float

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {"index": self.index, "angle": self.angle, "areaCm2": self.area_cm2}


class Plant:
    """Plant with exactly PLANT_SLOTS panel setups.

    Slots can be overwritten but never added or removed. Each slot holds
    the plant's own copy of a setup.

    Attributes:
        reporter: Sink for resize and slot report lines
    """

    def __init__(
        self,
        setups: Optional[Sequence[PanelSetup]] = None,
        reporter: Optional[Reporter] = None,
    ):
        """Initialize plant.

        Args:
            setups: Exactly PLANT_SLOTS setups to copy in; all slots get the
                default setup if None
            reporter: Reporting sink (default reporter if None)

        Raises:
            ValueError: If setups does not hold exactly PLANT_SLOTS entries
        """
        if setups is None:
            self._setups = [PanelSetup() for _ in range(PLANT_SLOTS)]
        else:
            if len(setups) != PLANT_SLOTS:
                raise ValueError(
                    f"plant needs exactly {PLANT_SLOTS} setups, got {len(setups)}"
                )
            self._setups = [setup.copy() for setup in setups]
        self.reporter = reporter

    def _check_index(self, index: int) -> None:
        try:
            index = operator.index(index)
        except TypeError:
            raise TypeError(
                f"slot index must be an integer, not {type(index).__name__}"
            ) from None
        if not 0 <= index < PLANT_SLOTS:
            raise SlotIndexError(index)

    def _reporter(self) -> Reporter:
        return self.reporter if self.reporter is not None else get_default_reporter()

    def __len__(self) -> int:
        return PLANT_SLOTS

    def __getitem__(self, index: int) -> PanelSetup:
        """Get the setup in a slot.

        Raises:
            SlotIndexError: If index is outside 0..PLANT_SLOTS-1
            TypeError: If index is not an integer
        """
        self._check_index(index)
        return self._setups[index]

    def __iter__(self) -> Iterator[PanelSetup]:
        return iter(self._setups)

    def set_panel_setup(self, setup: PanelSetup, index: int) -> None:
        """Overwrite a slot with a copy of setup.

        Raises:
            SlotIndexError: If index is outside 0..PLANT_SLOTS-1
        """
        self._check_index(index)
        self._setups[index] = setup.copy()

    def current_output(self, source: LightSource) -> float:
        """Total plant power for the given source position.

        Args:
            source: Light source (not modified)

        Returns:
            Sum of all setup outputs (W)
        """
        return sum(
            setup.current_power(illumination_angle(setup, source))
            for setup in self._setups
        )

    def resize_panel_at(self, index: int, nx: int, ny: int) -> float:
        """Resize the panel in a slot in place and report its area.

        Returns:
            New panel area (cm^2)

        Raises:
            SlotIndexError: If index is outside 0..PLANT_SLOTS-1
        """
        self._check_index(index)
        return self._setups[index].set_panel_elements(nx, ny, reporter=self._reporter())

    def slot_reports(self) -> list[SlotReport]:
        """Snapshot of index, mount angle and panel area for every slot."""
        return [
            SlotReport(index=i, angle=setup.angle, area_cm2=setup.panel.area_cm2)
            for i, setup in enumerate(self._setups)
        ]

    def report(self) -> list[SlotReport]:
        """Write one line per slot to the reporter.

        Returns:
            The reported slot snapshots
        """
        reports = self.slot_reports()
        reporter = self._reporter()
        for entry in reports:
            reporter.report_slot(entry.index, entry.angle, entry.area_cm2)
        return reports

    @property
    def max_power_w(self) -> float:
        """Sum of rated power of all panels (W)."""
        return sum(setup.panel.max_power_w for setup in self._setups)

    def get_state(self) -> dict:
        """Get plant configuration for telemetry.

        Returns:
            Dictionary with plant configuration
        """
        return {
            "slots": [entry.to_dict() for entry in self.slot_reports()],
            "maxPower": self.max_power_w,
        }
