"""Reporting sinks for plant diagnostics.

Model classes compute values and hand any human-readable output to a
reporter, so the model can be used without capturing stdout.
"""

import logging
from typing import Optional, Protocol


logger = logging.getLogger(__name__)


class Reporter(Protocol):
    """Sink for diagnostic lines produced by the model."""

    def report_area(self, area_cm2: float) -> None:
        ...

    def report_slot(self, index: int, angle: float, area_cm2: float) -> None:
        ...

    def report_output(
        self,
        source_angle: float,
        output_w: float,
        reference_w: Optional[float] = None,
    ) -> None:
        ...


class LoggingReporter:
    """Reporter writing one log record per call.

    Attributes:
        logger: Logger receiving the records
        level: Log level used for every record
    """

    def __init__(self, target: Optional[logging.Logger] = None, level: int = logging.INFO):
        self.logger = target if target is not None else logger
        self.level = level

    def report_area(self, area_cm2: float) -> None:
        self.logger.log(self.level, "panel area %.1f cm2", area_cm2)

    def report_slot(self, index: int, angle: float, area_cm2: float) -> None:
        self.logger.log(
            self.level, "  %d angle %.4f panel area %.1f", index, angle, area_cm2
        )

    def report_output(
        self,
        source_angle: float,
        output_w: float,
        reference_w: Optional[float] = None,
    ) -> None:
        if reference_w is None:
            self.logger.log(
                self.level,
                "Sun position: %.4f; Current output: %.2f W",
                source_angle,
                output_w,
            )
        else:
            self.logger.log(
                self.level,
                "Sun position: %.4f; Setup output: %.2f W; Current output: %.2f W",
                source_angle,
                reference_w,
                output_w,
            )


class NullReporter:
    """Reporter that discards everything."""

    def report_area(self, area_cm2: float) -> None:
        pass

    def report_slot(self, index: int, angle: float, area_cm2: float) -> None:
        pass

    def report_output(
        self,
        source_angle: float,
        output_w: float,
        reference_w: Optional[float] = None,
    ) -> None:
        pass


_default_reporter: Reporter = LoggingReporter()


def get_default_reporter() -> Reporter:
    """Get the reporter used when none is injected."""
    return _default_reporter

