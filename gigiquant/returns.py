"""Mean daily return, volatility and Sharpe ratio of a price series."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, TextIO


@dataclass(frozen=True)
class PortfolioStats:
    """Summary statistics of a portfolio's daily prices."""

    mean_return: float
    volatility: float
    sharpe: float


def daily_returns(prices: Sequence[float]) -> list[float]:
    """Return the relative change from each day's price to the next."""
    returns = []
    for previous, current in zip(prices, prices[1:]):
        if previous == 0:
            raise ValueError("cannot compute a return from a price of zero")
        returns.append((current - previous) / previous)
    return returns


def volatility(returns: Sequence[float], mean: float) -> float:
    """Return the population standard deviation of returns around mean."""
    if not returns:
        raise ValueError("volatility needs at least one return")
    spread = sum((value - mean) ** 2 for value in returns)
    return math.sqrt(spread / len(returns))


def analyze(prices: Sequence[float]) -> PortfolioStats:
    """Compute the mean return, volatility and Sharpe ratio of prices."""
    if len(prices) < 2:
        raise ValueError("at least two prices are needed")
    returns = daily_returns(prices)
    mean = sum(returns) / len(returns)
    vol = volatility(returns, mean)
    if vol == 0:
        raise ValueError("volatility is zero, the Sharpe ratio is undefined")
    return PortfolioStats(mean_return=mean, volatility=vol, sharpe=mean / vol)


def read_prices(source: TextIO) -> list[float]:
    """Read a count followed by that many prices from a text stream."""
    tokens = source.read().split()
    if not tokens:
        raise ValueError("missing number of observations")
    count = int(tokens[0])
    if count < 0:
        raise ValueError("number of observations cannot be negative")
    values = tokens[1 : 1 + count]
    if len(values) < count:
        raise ValueError(f"expected {count} prices, found {len(values)}")
    return [float(value) for value in values]


def _truncated(value: float) -> float:
    return math.trunc(value * 1000) / 1000


def solve(source: TextIO, sink: TextIO) -> None:
    """Read prices from source and write the three statistics to sink."""
    stats = analyze(read_prices(source))
    for value in (stats.mean_return, stats.volatility, stats.sharpe):
        sink.write(f"{_truncated(value):.3f}\n")