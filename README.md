# gigiquant

Small quantitative tools for price series. Each tool reads a plain-text input
file and writes its answer to an output file.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Usage

```
gigiquant INPUT OUTPUT
```

The tool is chosen from the input file's name: a name containing `data1.in`
to `data5.in` runs task 1, `data6.in` to `data10.in` task 2, `data11.in` to
`data15.in` task 3, and `data16.in` to `data20.in` task 4. An input file
whose name matches none of these leaves an empty output file.

The command exits with status 1 when fewer than two paths are given, when a
file cannot be opened (printing `Eroare la deschiderea fisierelor!`), or when
the input is invalid (the reason is printed to standard error). Otherwise it
exits with status 0.

### Task 1: returns, volatility and Sharpe ratio (`gigiquant.returns`)

Input: the number of observations, then that many portfolio values, separated
by whitespace. Output, one per line, truncated (not rounded) to three
decimals: the mean daily return, the volatility (population standard
deviation of the daily returns) and the Sharpe ratio (mean over volatility).

At least two prices are needed, no price used as a base may be zero, and the
volatility must not be zero; otherwise the input is rejected.

### Task 2: odd one out among three portfolios (`gigiquant.stacks`)

Input: three blocks, each a name line followed by value lines. A line that
starts with a number is a value of the current portfolio; any other line
starts the next portfolio and gives its name. Values before the first name
and portfolios after the third are ignored.

The values are compared day by day from the last one backwards, for as many
days as the shortest portfolio has. On each day where exactly one portfolio
differs from the other two, a line `ziua N - DIFF - NAME` is written, with the
difference to two decimals and the name of the differing portfolio.

### Task 3: opposite trends (`gigiquant.tree`)

Input: a comma-separated line of stock symbols, followed by rows of
comma-separated values, one value per symbol. Reading stops at the first row
with the wrong number of fields or a value that is not a number; blank lines
are skipped.

The stocks are split into a binary tree, row by row: stocks whose value fell
to the next row go left, those that rose or stayed the same go right. Every
pair of stocks, in input order, whose leaves lie on paths of equal length
that differ at every step is written as `A-B`, one pair per line.

### Task 4: Markov price chain (`gigiquant.markov`)

Input: the number of observations, the interval width, the number of days,
the start price, the target price and the observations, separated by
whitespace. Every price is snapped down to the lower bound of its interval.
Transition probabilities between intervals are estimated from consecutive
observations, and the probability of being in the target interval is written
for each day, one per line, as an exact fraction (`n/d`, or a bare integer).
The first line is 1 if start and target share an interval and 0 otherwise.

Only 20 intervals are tracked, counted up from the lowest observation; a
price outside them, a non-positive width or a short input is rejected.

## Library use

```python
from gigiquant import returns

stats = returns.analyze([100.0, 110.0, 99.0])
print(stats.mean_return, stats.volatility, stats.sharpe)
```

Each of `gigiquant.returns`, `gigiquant.stacks`, `gigiquant.tree` and
`gigiquant.markov` provides `solve(source, sink)`, taking an open text input
stream and an open text output stream. The pieces are also available on
their own, for example `returns.daily_returns`, `stacks.find_outliers`,
`tree.build_tree` and `tree.opposite_pairs`, and `markov.read_input` with
`markov.target_probabilities` and `markov.format_fraction`.
`gigiquant.cli` offers `task_for_path(path)` and `run(input_path, output_path)`.

## Countdown

```
gigiquant-countdown [START]
```

prints how many rounds it takes to bring START (30 by default) down to zero
or below, where each round subtracts two repeatedly while the number is
positive. The same count is available as `gigiquant.countdown.count_rounds`.