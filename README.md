# ninetools

This package installs three small command-line tools: `btc`, `rpn` and `pmergeme`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## btc: value bitcoin amounts on given dates

```
btc input.txt
```

`btc` takes exactly one argument and reads its rates from `data.csv` in the current directory. The first line of that file may be the header `date,exchange_rate`. Every other line must have the form `YYYY-MM-DD,rate`, where the rate has at most two decimals. If any line is malformed, nothing is converted.

The input file name must end in `.txt`. Its first line must be `date | value`. Each later line must have the form `YYYY-MM-DD | value`. The date must be a real calendar date, and the value must lie between 0 and 100. For each accepted line, `btc` prints `date=>value = product` on standard output, where the product is the amount times the rate.

The rate is chosen as follows:

- Dates before 2009-02-01 use a rate of 0.
- If the database has the exact date, its rate is used.
- Otherwise, the rate of the entry just before the first later entry in the same month is used.
- If the month has no later entry, the line produces no output.

A rejected line is reported on standard error as `Erreur: <reason> for: <line>`, and processing continues with the next line. Problems with the arguments or the files are reported as `Erreur: <reason>`. The command always ends by printing `Destructor class` and exits with status 0.

From Python:

```python
from ninetools.btc import load_database, convert_lines, run

rates = load_database("data.csv")
for text, is_error in convert_lines(rates, ["date | value", "2011-01-03 | 3"]):
    print(text)

results = run("input.txt", "data.csv")  # list of (text, is_error)
```

`ninetools.btc` also provides `lookup_rate(rates, date)` and `format_result(date, value, rate)`. The checks live in `ninetools.btc_validation`, and they raise `InputError`.

## rpn: evaluate reverse Polish expressions

```
rpn "8 9 * 9 - 9 - 9 - 4 - 1 +"
```

Operands are single digits and the operators are `+ - * /`, separated by spaces. Division truncates toward zero. If either operand of a division is zero, the result is 0. If an operator finds fewer than two operands, evaluation stops at that point.

The result is printed on standard output. A malformed argument is reported on standard error as `Error: <reason>`. An expression that does not leave exactly one value, or that contains any other character, is reported as `Erreur`. The exit status is always 0.

From Python, `ninetools.rpn.validate_expression(expression)` checks the shape of the expression. `ninetools.rpn.evaluate(expression)` returns the integer result. Both raise `RPNError` on bad input.

## pmergeme: merge-insertion sort

```
pmergeme 3 5 9 7 4
```

Each argument must be a non-negative integer that fits in a signed 32-bit integer, optionally prefixed with `+`. On invalid arguments, the reason is printed on standard error and the exit status is 2.

On success, the tool prints these lines:

- A `Before ...` line with the arguments, leading `+` removed.
- An `After: ...` line with the sorted values.
- Two timing lines, in microseconds: one for a list-backed run and one for a deque-backed run.

With exactly two values, the larger is listed first.

From Python:

```python
from ninetools.pmerge import merge_insert_sort, make_pairs, jacobsthal, jacobsthal_order
from ninetools.pmerge_validation import check_arguments, ArgumentError

merge_insert_sort([3, 5, 9, 7, 4])   # [3, 4, 5, 7, 9]
```

`ninetools.pmerge_cli` provides `format_before(args)` and `format_after(values)` for the two output lines.

## Limits

The `btc` command always reads `data.csv` from the current directory. To use another database file, call `ninetools.btc.run(input_path, database_path)` from Python.