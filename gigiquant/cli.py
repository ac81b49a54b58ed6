"""Command line entry: pick the task from the input file name and run it."""

from __future__ import annotations

import sys
from typing import Callable, Sequence, TextIO

from gigiquant import markov, returns, stacks, tree

_FILES = tuple(f"data{number}.in" for number in range(1, 21))
_FILES_PER_TASK = 5

_SOLVERS: dict[int, Callable[[TextIO, TextIO], None]] = {
    1: returns.solve,
    2: stacks.solve,
    3: tree.solve,
    4: markov.solve,
}


def task_for_path(path: str) -> int | None:
    """Return the task number encoded in the input file name, or None."""
    for position, name in enumerate(_FILES):
        if name in path:
            return position // _FILES_PER_TASK + 1
    return None


def run(input_path: str, output_path: str) -> None:
    """Solve the task chosen by input_path, writing the answer to output_path."""
    with open(input_path, encoding="utf-8") as source, open(
        output_path, "w", encoding="utf-8"
    ) as sink:
        solver = _SOLVERS.get(task_for_path(input_path))
        if solver is not None:
            solver(source, sink)


def main(argv: Sequence[str] | None = None) -> int:
    """Run with an input and an output path; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        return 1
    try:
        run(args[0], args[1])
    except OSError:
        print("Eroare la deschiderea fisierelor!", end="")
        return 1
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())