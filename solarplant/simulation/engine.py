"""Sweep engine for the solar plant simulator.

Moves the light source in discrete steps and records plant output.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from solarplant.config import Config, get_config
from solarplant.power.illumination import illumination_angle
from solarplant.power.light_source import LightSource
from solarplant.power.panel_setup import PanelSetup
from solarplant.power.plant import Plant
from solarplant.power.reporting import Reporter, get_default_reporter


class SimulationState(Enum):
    """Simulation state enumeration."""
    STOPPED = auto()
    RUNNING = auto()
    PAUSED = auto()


@dataclass
class SweepResult:
    """Recorded output of one sweep.

    Attributes:
        angles: Source angle of each sample (rad)
        outputs: Plant output of each sample (W)
        reference_outputs: Output of the traced reference setup (W), if any
    """

    angles: NDArray[np.float64]
    outputs: NDArray[np.float64]
    reference_outputs: Optional[NDArray[np.float64]] = None

    def __len__(self) -> int:
        return len(self.angles)

    @property
    def peak_output(self) -> float:
        """Highest plant output (W), 0 for an empty sweep."""
        if len(self.outputs) == 0:
            return 0.0
        return float(np.max(self.outputs))

    @property
    def peak_angle(self) -> Optional[float]:
        """Source angle of the first highest sample (rad)."""
        if len(self.outputs) == 0:
            return None
        return float(self.angles[int(np.argmax(self.outputs))])

    @property
    def mean_output(self) -> float:
        """Mean plant output over all samples (W)."""
        if len(self.outputs) == 0:
            return 0.0
        return float(np.mean(self.outputs))

    @property
    def flatness(self) -> float:
        """Mean over peak output. 1.0 is a perfectly flat day profile."""
        peak = self.peak_output
        if peak <= 0.0:
            return 0.0
        return self.mean_output / peak

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        result = {
            "angles": self.angles.tolist(),
            "outputs": self.outputs.tolist(),
            "peakOutput": self.peak_output,
            "peakAngle": self.peak_angle,
            "meanOutput": self.mean_output,
            "flatness": self.flatness,
        }
        if self.reference_outputs is not None:
            result["referenceOutputs"] = self.reference_outputs.tolist()
        return result


class SweepEngine:
    """Steps a light source across the sky over a plant.

    Attributes:
        plant: The plant being simulated
        light_source: The moving light source
        reference_setup: Optional single setup traced next to the plant
        state: Current simulation state
    """

    def __init__(
        self,
        plant: Plant,
        light_source: Optional[LightSource] = None,
        config: Optional[Config] = None,
        reporter: Optional[Reporter] = None,
        reference_setup: Optional[PanelSetup] = None,
    ):
        """Initialize sweep engine.

        Args:
            plant: Plant to query each step
            light_source: Light source to move (new one at the sweep start if None)
            config: Configuration object (uses global config if None)
            reporter: Sink for per-step output lines (default reporter if None)
            reference_setup: Setup whose output is recorded alongside the plant
        """
        if config is None:
            config = get_config()

        sweep_cfg = config.sweep

        self.plant = plant
        self.start_angle = sweep_cfg.start_angle
        self.stop_angle = sweep_cfg.stop_angle
        self._step = 0.0
        self.set_step(sweep_cfg.step)

        if light_source is None:
            light_source = LightSource(self.start_angle)
        self.light_source = light_source

        self.reporter = reporter if reporter is not None else get_default_reporter()
        self.reference_setup = reference_setup
        self.state = SimulationState.STOPPED

        self._angles: list[float] = []
        self._outputs: list[float] = []
        self._reference_outputs: list[float] = []

    @property
    def step_size(self) -> float:
        """Source increment per step (rad)."""
        return self._step

    def set_step(self, step: float) -> None:
        """Set source increment per step.

        Args:
            step: Increment (rad), must be positive

        Raises:
            ValueError: If step is not positive
        """
        if step <= 0:
            raise ValueError("step must be positive")
        self._step = step

    @property
    def finished(self) -> bool:
        """True once the light source has reached the stop angle."""
        return self.light_source.angle >= self.stop_angle

    def start(self) -> None:
        """Start or resume simulation."""
        self.state = SimulationState.RUNNING

    def pause(self) -> None:
        """Pause simulation."""
        if self.state == SimulationState.RUNNING:
            self.state = SimulationState.PAUSED

    def stop(self) -> None:
        """Stop simulation."""
        self.state = SimulationState.STOPPED

    def reset(self, angle: Optional[float] = None) -> None:
        """Rewind the light source and clear recorded samples.

        Args:
            angle: Source angle to restart from (sweep start if None)
        """
        self.state = SimulationState.STOPPED
        self.light_source.set_angle(self.start_angle if angle is None else angle)
        self._angles.clear()
        self._outputs.clear()
        self._reference_outputs.clear()

    def step(self) -> None:
        """Record one sample and advance the light source.

        Only advances if the simulation is running.
        """
        if self.state != SimulationState.RUNNING:
            return

        source_angle = self.light_source.angle
        output = self.plant.current_output(self.light_source)

        reference = None
        if self.reference_setup is not None:
            reference = self.reference_setup.current_power(
                illumination_angle(self.reference_setup, self.light_source)
            )
            self._reference_outputs.append(reference)

        self._angles.append(source_angle)
        self._outputs.append(output)
        self.reporter.report_output(source_angle, output, reference)

        self.light_source.move_angle_by(self._step)

    def run(self) -> SweepResult:
        """Step until the light source reaches the stop angle.

        Returns:
            All samples recorded since the last reset
        """
        self.start()
        while self.state == SimulationState.RUNNING and not self.finished:
            self.step()
        self.stop()
        return self.result()

    def result(self) -> SweepResult:
        """Get samples recorded so far."""
        reference = (
            np.array(self._reference_outputs, dtype=np.float64)
            if self.reference_setup is not None
            else None
        )
        return SweepResult(
            angles=np.array(self._angles, dtype=np.float64),
            outputs=np.array(self._outputs, dtype=np.float64),
            reference_outputs=reference,
        )

    def get_telemetry(self) -> dict:
        """Get current telemetry data.

        Returns:
            Dictionary with engine state and the latest sample
        """
        return {
            "state": self.state.name,
            "sourceAngle": self.light_source.angle,
            "stopAngle": self.stop_angle,
            "step": self._step,
            "samples": len(self._angles),
            "lastOutput": self._outputs[-1] if self._outputs else None,
            "plant": self.plant.get_state(),
        }
