"""Spot days on which one of three portfolios disagrees with the other two."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TextIO

_NUMBER = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


@dataclass
class Portfolio:
    """A named portfolio and its values in the order they were read."""

    name: str
    values: list[float] = field(default_factory=list)


@dataclass(frozen=True)
class Outlier:
    """A day on which one portfolio differs from the other two."""

    day: int
    difference: float
    name: str


def _leading_number(line: str) -> float | None:
    match = _NUMBER.match(line)
    return float(match.group()) if match else None


def read_portfolios(source: TextIO) -> tuple[Portfolio, Portfolio, Portfolio]:
    """Read three portfolios, each a name line followed by value lines."""
    portfolios = (Portfolio(""), Portfolio(""), Portfolio(""))
    section = 0
    for raw in source:
        line = raw.partition("\r")[0].partition("\n")[0]
        value = _leading_number(line)
        if value is None:
            section += 1
            if section <= len(portfolios):
                portfolios[section - 1].name = line
        elif 1 <= section <= len(portfolios):
            portfolios[section - 1].values.append(value)
    return portfolios


def find_outliers(first: Portfolio, second: Portfolio, third: Portfolio) -> list[Outlier]:
    """Compare the portfolios from their latest value backwards, day by day."""
    outliers = []
    days = zip(reversed(first.values), reversed(second.values), reversed(third.values))
    for day, (a, b, c) in enumerate(days, start=1):
        if a == b and a != c:
            outliers.append(Outlier(day, abs(a - c), third.name))
        elif a == c and b != c:
            outliers.append(Outlier(day, abs(b - c), second.name))
        elif c == b and b != a:
            outliers.append(Outlier(day, abs(a - c), first.name))
    return outliers


def solve(source: TextIO, sink: TextIO) -> None:
    """Read three portfolios from source and report outliers to sink."""
    for outlier in find_outliers(*read_portfolios(source)):
        sink.write(f"ziua {outlier.day} - {outlier.difference:.2f} - {outlier.name}\n")