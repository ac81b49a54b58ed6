import io

from gigiquant.stacks import Outlier, Portfolio, find_outliers, read_portfolios, solve


def test_read_portfolios_sections():
    text = "Alpha\n1\n2\nBeta\n3\nGamma\n4\n5\n"
    first, second, third = read_portfolios(io.StringIO(text))
    assert (first.name, first.values) == ("Alpha", [1.0, 2.0])
    assert (second.name, second.values) == ("Beta", [3.0])
    assert (third.name, third.values) == ("Gamma", [4.0, 5.0])


def test_read_portfolios_blank_line_starts_section():
    first, second, third = read_portfolios(io.StringIO("Alpha\n1\n\n2\n"))
    assert first.values == [1.0]
    assert (second.name, second.values) == ("", [2.0])
    assert third == Portfolio("")


def test_read_portfolios_number_prefix_counts_as_value():
    first, _, _ = read_portfolios(io.StringIO("Alpha\n12abc\n"))
    assert first.values == [12.0]


def test_read_portfolios_ignores_values_before_header_and_after_third():
    text = "7\nA\n1\nB\n2\nC\n3\nD\n4\n"
    portfolios = read_portfolios(io.StringIO(text))
    assert [p.values for p in portfolios] == [[1.0], [2.0], [3.0]]


def test_read_portfolios_strips_carriage_return():
    first, _, _ = read_portfolios(io.StringIO("Alpha\r\n3\r\n"))
    assert first.name == "Alpha"
    assert first.values == [3.0]


def test_no_outliers_when_all_equal():
    p = Portfolio("A", [1.0, 2.0, 3.0])
    assert find_outliers(p, Portfolio("B", [1.0, 2.0, 3.0]), Portfolio("C", [1.0, 2.0, 3.0])) == []


def test_no_outliers_when_all_differ():
    assert find_outliers(Portfolio("A", [1.0]), Portfolio("B", [2.0]), Portfolio("C", [3.0])) == []


def test_outliers_name_the_odd_portfolio():
    a = Portfolio("A", [10.0, 20.0])
    b = Portfolio("B", [10.0, 25.0])
    c = Portfolio("C", [7.0, 20.0])
    outliers = find_outliers(a, b, c)
    assert [(o.day, o.name) for o in outliers] == [(1, "B"), (2, "C")]


def test_first_portfolio_odd_one_out():
    outliers = find_outliers(Portfolio("A", [4.0]), Portfolio("B", [9.0]), Portfolio("C", [9.0]))
    assert outliers == [Outlier(1, abs(4.0 - 9.0), "A")]


def test_days_stop_at_shortest_portfolio():
    a = Portfolio("A", [1.0, 1.0, 1.0])
    b = Portfolio("B", [1.0, 1.0, 1.0])
    c = Portfolio("C", [2.0, 2.0])
    outliers = find_outliers(a, b, c)
    assert [o.day for o in outliers] == [1, 2]


def test_solve_output_format():
    text = "A\n10\n20\nB\n10\n25\nC\n7\n20\n"
    sink = io.StringIO()
    solve(io.StringIO(text), sink)
    assert sink.getvalue() == "ziua 1 - 5.00 - B\nziua 2 - 3.00 - C\n"


def test_solve_missing_portfolios_writes_nothing():
    sink = io.StringIO()
    solve(io.StringIO("A\n1\n2\n"), sink)
    assert sink.getvalue() == ""