"""Race checkpoints and builders that turn a list of them into reports."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

_SEPARATOR = "------------------"


@dataclass(frozen=True)
class Checkpoint:
    """A named point on the route; missing a mandatory one means DNF."""

    name: str
    latitude: float
    longitude: float
    is_mandatory: bool
    penalty: float = 0.0

    def __post_init__(self) -> None:
        if not (-90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0):
            raise ValueError("Invalid coordinates")


def _hours(value: float) -> str:
    return f"{value:.2f} hours"


class CheckpointBuilder(ABC):
    """Receives checkpoints one at a time and produces a text result."""

    @abstractmethod
    def add_checkpoint(self, checkpoint: Checkpoint, index: int) -> None:
        """Take in ``checkpoint`` at 1-based position ``index``."""

    @abstractmethod
    def result(self) -> str:
        """Return what has been built so far."""


class TextReportBuilder(CheckpointBuilder):
    """Builds a numbered, human-readable list of checkpoints."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def add_checkpoint(self, checkpoint: Checkpoint, index: int) -> None:
        outcome = (
            "Mandatory (DNF)"
            if checkpoint.is_mandatory
            else f"Penalty: {_hours(checkpoint.penalty)}"
        )
        self._lines.append(
            f"{index}. {checkpoint.name} "
            f"({checkpoint.latitude:.2f}, {checkpoint.longitude:.2f}) degrees - {outcome}\n"
        )

    def result(self) -> str:
        return "Checkpoints List:\n" + "".join(self._lines) + _SEPARATOR + "\n"


class PenaltyCalculatorBuilder(CheckpointBuilder):
    """Sums the penalties of the optional checkpoints."""

    def __init__(self) -> None:
        self.total_penalty = 0.0

    def add_checkpoint(self, checkpoint: Checkpoint, index: int) -> None:
        if not checkpoint.is_mandatory:
            self.total_penalty += checkpoint.penalty

    def result(self) -> str:
        return f"Total Penalty: {_hours(self.total_penalty)}"


class CheckpointDirector:
    """Feeds checkpoints to a builder in order, numbering them from 1."""

    def build_report(
        self, checkpoints: Iterable[Checkpoint], builder: CheckpointBuilder
    ) -> None:
        for index, checkpoint in enumerate(checkpoints, start=1):
            builder.add_checkpoint(checkpoint, index)


SAMPLE_ROUTE = (
    Checkpoint("Start", 55.7558, 37.6176, True),
    Checkpoint("Mountain Pass", 45.2345, 90.1123, False, 2.5),
    Checkpoint("River Crossing", -35.1234, 150.1234, False, 1.75),
    Checkpoint("Finish", -33.8688, 151.2093, True),
)


def main(argv: list[str] | None = None) -> int:
    """Print the report and total penalty for the sample route."""
    director = CheckpointDirector()

    text_builder = TextReportBuilder()
    director.build_report(SAMPLE_ROUTE, text_builder)
    sys.stdout.write(text_builder.result() + "\n")

    penalty_builder = PenaltyCalculatorBuilder()
    director.build_report(SAMPLE_ROUTE, penalty_builder)
    sys.stdout.write(penalty_builder.result() + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())