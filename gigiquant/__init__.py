"""Tools for price series: returns and Sharpe ratio, outlier days, trend trees and Markov chains."""

__version__ = "0.1.0"
__all__ = ["cli", "countdown", "markov", "returns", "stacks", "tree"]