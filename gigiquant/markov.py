"""Probability that a price lands in a target interval after a number of days."""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Sequence, TextIO

STATES = 20


@dataclass(frozen=True)
class ChainInput:
    """Observed prices and the question asked about them, already snapped to intervals."""

    width: float
    days: int
    start: float
    target: float
    observations: tuple[float, ...]

    @property
    def minimum(self) -> float:
        """Lowest observed interval, the origin of the state numbering."""
        if not self.observations:
            raise ValueError("at least one observation is needed")
        return min(self.observations)


def snap(value: float, width: float) -> float:
    """Return the lower bound of the interval of the given width holding value."""
    if width == 0:
        raise ValueError("interval width cannot be zero")
    return value - math.fmod(value, width)


def read_input(source: TextIO) -> ChainInput:
    """Read count, width, days, start, target and the observed prices."""
    tokens = source.read().split()
    if len(tokens) < 5:
        raise ValueError("incomplete header: expected count, width, days, start and target")
    count = int(tokens[0])
    if count < 0:
        raise ValueError("number of observations cannot be negative")
    width = float(tokens[1])
    if width <= 0:
        raise ValueError("interval width must be positive")
    days = int(tokens[2])
    start = snap(float(tokens[3]), width)
    target = snap(float(tokens[4]), width)
    values = tokens[5 : 5 + count]
    if len(values) < count:
        raise ValueError(f"expected {count} observations, found {len(values)}")
    observations = tuple(snap(float(value), width) for value in values)
    return ChainInput(width, days, start, target, observations)


def _state(value: float, minimum: float, width: float) -> int:
    index = int((value - minimum) / width)
    if not 0 <= index < STATES:
        raise ValueError(f"value {value} falls outside the {STATES} tracked intervals")
    return index


def transition_counts(
    observations: Sequence[float], minimum: float, width: float
) -> list[list[int]]:
    """Count how often each interval is followed by each other interval."""
    counts = [[0] * STATES for _ in range(STATES)]
    for previous, current in zip(observations, observations[1:]):
        counts[_state(previous, minimum, width)][_state(current, minimum, width)] += 1
    return counts


def transition_probabilities(counts: Sequence[Sequence[int]]) -> list[list[Fraction]]:
    """Turn each row of counts into exact probabilities; empty rows stay zero."""
    matrix = []
    for row in counts:
        total = sum(row)
        if total == 0:
            matrix.append([Fraction(0)] * len(row))
        else:
            matrix.append([Fraction(count, total) for count in row])
    return matrix


def step(
    distribution: Sequence[Fraction], probabilities: Sequence[Sequence[Fraction]]
) -> list[Fraction]:
    """Advance a distribution over intervals by one day."""
    return [
        sum((p * d for p, d in zip(column, distribution)), Fraction(0))
        for column in zip(*probabilities)
    ]


def target_probabilities(data: ChainInput) -> list[Fraction]:
    """Return the probability of being in the target interval, day by day."""
    minimum = data.minimum
    probabilities = transition_probabilities(
        transition_counts(data.observations, minimum, data.width)
    )
    start_index = _state(data.start, minimum, data.width)
    target_index = _state(data.target, minimum, data.width)
    distribution = [Fraction(int(state == start_index)) for state in range(STATES)]
    results = [Fraction(int(data.start == data.target))]
    for _ in range(max(data.days - 2, 0) + 1):
        distribution = step(distribution, probabilities)
        results.append(distribution[target_index])
    return results


def format_fraction(value: Fraction) -> str:
    """Write a fraction as n/d, or as a bare integer when d is 1."""
    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"


def solve(source: TextIO, sink: TextIO) -> None:
    """Read the chain input from source and write daily probabilities to sink."""
    values = target_probabilities(read_input(source))
    sink.write("\n".join(format_fraction(value) for value in values))