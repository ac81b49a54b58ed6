"""Split stocks by daily trend into a binary tree and pair opposite ones."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Iterator, Sequence, TextIO

Path = tuple[int, ...]


@dataclass
class TrendNode:
    """Stocks that moved the same way up to this depth.

    The left child holds those whose value fell on the next day, the
    right child those whose value rose or stayed the same.
    """

    stocks: list[str]
    depth: int
    left: TrendNode | None = None
    right: TrendNode | None = None

    def is_leaf(self) -> bool:
        """Return whether the node has no children."""
        return self.left is None and self.right is None


def read_input(source: TextIO) -> tuple[list[str], list[list[float]]]:
    """Read a comma separated symbol line followed by rows of values."""
    header = source.readline().partition("\n")[0]
    symbols = [symbol for symbol in header.split(",") if symbol]
    width = len(symbols)
    rows: list[list[float]] = []
    for line in source:
        if not line.strip():
            continue
        parts = line.split(",")
        if len(parts) != width:
            break
        try:
            rows.append([float(part) for part in parts])
        except ValueError:
            break
    return symbols, rows


def build_tree(symbols: Sequence[str], rows: Sequence[Sequence[float]]) -> TrendNode | None:
    """Build the trend tree of symbols over the rows of values."""
    column: dict[str, int] = {}
    for position, symbol in enumerate(symbols):
        column.setdefault(symbol, position)

    def grow(stocks: list[str], depth: int) -> TrendNode | None:
        if not stocks:
            return None
        node = TrendNode(stocks, depth)
        if depth >= len(rows) - 1:
            return node
        today, tomorrow = rows[depth], rows[depth + 1]
        falling = [s for s in stocks if tomorrow[column[s]] < today[column[s]]]
        rising = [s for s in stocks if not tomorrow[column[s]] < today[column[s]]]
        node.left = grow(falling, depth + 1)
        node.right = grow(rising, depth + 1)
        return node

    return grow(list(symbols), 0)


def _walk(node: TrendNode, path: Path) -> Iterator[tuple[TrendNode, Path]]:
    if node.is_leaf():
        yield node, path
        return
    if node.left is not None:
        yield from _walk(node.left, path + (0,))
    if node.right is not None:
        yield from _walk(node.right, path + (1,))


def leaf_paths(root: TrendNode | None) -> list[tuple[TrendNode, Path]]:
    """Return each leaf with its path, 0 for left and 1 for right, left first."""
    return [] if root is None else list(_walk(root, ()))


def paths_opposite(first: Sequence[int], second: Sequence[int]) -> bool:
    """Return whether two paths have equal length and differ at every step."""
    return len(first) == len(second) and all(a != b for a, b in zip(first, second))


def opposite_pairs(root: TrendNode | None, symbols: Sequence[str]) -> list[tuple[str, str]]:
    """Return pairs of symbols, in input order, whose leaves lie on opposite paths."""
    leaves = leaf_paths(root)

    def path_of(symbol: str) -> Path | None:
        return next((path for leaf, path in leaves if symbol in leaf.stocks), None)

    located = [(symbol, path_of(symbol)) for symbol in symbols]
    return [
        (a, b)
        for (a, path_a), (b, path_b) in combinations(located, 2)
        if path_a is not None and path_b is not None and paths_opposite(path_a, path_b)
    ]


def solve(source: TextIO, sink: TextIO) -> None:
    """Read symbols and values from source and write opposite pairs to sink."""
    symbols, rows = read_input(source)
    root = build_tree(symbols, rows)
    sink.write("\n".join(f"{a}-{b}" for a, b in opposite_pairs(root, symbols)))