"""Integration tests for full day sweeps over the demo plants.

Verifies that:
1. A uniform plant gives a single-peaked cosine profile
2. The plant output tracks the traced reference setup
3. The fan plant is configured and reported as arranged
"""

import logging

import numpy as np
import pytest

from solarplant.config import Config, SweepConfig
from solarplant.power import LightSource, LoggingReporter, NullReporter, Panel
from solarplant.power.illumination import illumination_angle
from solarplant.simulation import SweepEngine
from solarplant.simulation.scenarios import demo_test_setup, fan_plant, uniform_plant


@pytest.fixture
def quiet():
    return NullReporter()


class TestUniformPlantSweep:
    """Day sweep over ten identical setups."""

    def test_test_setup(self, quiet):
        """Demo setup is tilted -pi/2 with a 2x3 panel."""
        setup = demo_test_setup(reporter=quiet)

        assert setup.angle == pytest.approx(-np.pi / 2)
        assert setup.panel == Panel(2, 3)
        assert setup.current_power(np.pi / 2) == pytest.approx(0.0, abs=1e-9)
        assert setup.efficiency(np.pi) == 0.0

    def test_single_peak_at_zenith(self, quiet):
        """Output rises to one peak with the sun overhead, then falls."""
        setup = demo_test_setup(reporter=quiet)
        engine = SweepEngine(
            uniform_plant(setup, reporter=quiet),
            config=Config(),
            reporter=quiet,
            reference_setup=setup,
        )

        result = engine.run()

        peak = int(np.argmax(result.outputs))
        assert len(result) >= 16
        assert result.peak_angle == pytest.approx(0.0, abs=1e-9)
        assert result.peak_output == pytest.approx(10 * 90.0)
        assert np.all(np.diff(result.outputs[: peak + 1]) >= 0)
        assert np.all(np.diff(result.outputs[peak:]) <= 0)

    def test_cosine_shape(self, quiet):
        """Each sample equals the cosine law at that sun angle."""
        setup = demo_test_setup(reporter=quiet)
        engine = SweepEngine(uniform_plant(setup, reporter=quiet), config=Config(), reporter=quiet)

        result = engine.run()

        expected = 900.0 * np.clip(np.cos(result.angles), 0.0, None)
        np.testing.assert_allclose(result.outputs, expected, atol=1e-9)

    def test_plant_is_ten_reference_setups(self, quiet):
        """Plant output is ten times the traced setup output."""
        setup = demo_test_setup(reporter=quiet)
        engine = SweepEngine(
            uniform_plant(setup, reporter=quiet),
            config=Config(),
            reporter=quiet,
            reference_setup=setup,
        )

        result = engine.run()

        np.testing.assert_allclose(result.outputs, 10 * result.reference_outputs)

    def test_sweep_is_logged(self, caplog):
        """Each step writes one log line."""
        reporter = LoggingReporter()
        setup = demo_test_setup(reporter=NullReporter())
        config = Config(sweep=SweepConfig(start_angle=0.0, stop_angle=1.0, step=0.5))
        engine = SweepEngine(uniform_plant(setup), config=config, reporter=reporter)

        with caplog.at_level(logging.INFO):
            engine.run()

        messages = [record.getMessage() for record in caplog.records]
        assert len(messages) == 2
        assert messages[0].startswith("Sun position: 0.0000")


class TestFanPlant:
    """Plant arranged as \\ \\ \\ \\ _ _ / / / /."""

    def test_layout(self, quiet):
        """Slots carry the fan angles and panel sizes."""
        plant = fan_plant(reporter=quiet)

        angles = [setup.angle for setup in plant]
        assert angles == pytest.approx([np.pi / 4] * 4 + [np.pi / 2] * 2 + [-np.pi / 4] * 4)
        assert [setup.panel for setup in plant] == [Panel(10, 10)] * 4 + [Panel(20, 30)] * 6

    def test_resize_reported(self):
        """Resizing the first four panels reports their area."""
        areas = []

        class AreaReporter(NullReporter):
            def report_area(self, area_cm2):
                areas.append(area_cm2)

        fan_plant(reporter=AreaReporter())

        assert areas == [pytest.approx(6000.0)] * 4

    def test_output_at_zenith(self, quiet):
        """Output with the sun overhead matches the per-slot sum."""
        plant = fan_plant(reporter=quiet)
        source = LightSource(0.0)

        expected = 4 * 1500.0 * np.cos(np.pi / 4) + 2 * 9000.0 + 4 * 9000.0 * np.cos(np.pi / 4)

        assert plant.current_output(source) == pytest.approx(expected)
        assert illumination_angle(plant[9], source) == pytest.approx(np.pi / 4)

    def test_report(self, quiet):
        """Report lists each slot's angle and area."""
        plant = fan_plant(reporter=quiet)

        reports = plant.report()

        assert [entry.area_cm2 for entry in reports[:5]] == [6000.0] * 4 + [36000.0]
        assert reports[9].angle == pytest.approx(-np.pi / 4)

    def test_fan_sweep_runs_past_stop(self, quiet):
        """Sweep extended by one step samples the stop angle too."""
        config = Config(
            sweep=SweepConfig(stop_angle=np.pi / 2 + np.pi / 16, step=np.pi / 16)
        )
        engine = SweepEngine(fan_plant(reporter=quiet), config=config, reporter=quiet)

        result = engine.run()

        assert result.angles[-1] >= np.pi / 2 - 1e-9
        assert result.peak_output > 0.0
