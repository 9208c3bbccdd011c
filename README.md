# handycalc

A set of small calculators for the terminal. Each one is also available as a
plain Python function or class.

## Installation

```
pip install .
```

## Commands

Every command takes its inputs as arguments. When an argument is left out, the
command asks for it on standard input instead.

| Command | What it does |
| --- | --- |
| `handycalc-temperature [CELSIUS]` | Converts a Celsius temperature (-273.15 to 572.65) to Fahrenheit |
| `handycalc-clock [HOUR MINUTE]` | Reads an hour and a minute such as `11 45` and prints `Time: 11:45` |
| `handycalc-bmi [HEIGHT WEIGHT]` | Computes body mass index from height in centimetres and weight in kilograms, to three decimal places |
| `handycalc-arithmetic [FIRST SECOND]` | Shows the sum, difference, product, quotient and remainder of two integers |
| `handycalc-fuel [DISTANCE FUEL]` | Reports fuel use in litres per 100 kilometres |
| `handycalc-running-sum [NUMBERS...]` | Keeps a running total of the numbers until a 0 is reached |
| `handycalc-matrix` | Prints a fixed 4×3 matrix with tab-separated columns |
| `handycalc-range-sum [LOWER UPPER]` | Sums every integer between two bounds, inclusive, in either order |
| `handycalc-file-stats [FILENAME] [-o OUTPUT]` | Reads numbers from a file, prints their count, sum and average, and writes the same report to `OUTPUT` (default `output.txt`) |

Invalid input makes a command print an error and exit with status 1.
`handycalc-file-stats` only warns when it cannot write the output file.

## Using it from Python

```python
from handycalc.temperature import celsius_to_fahrenheit
from handycalc.clock import TimeOfDay, parse_time
from handycalc.bmi import calculate_bmi
from handycalc.arithmetic import IntegerCalculator
from handycalc.fuel import fuel_efficiency
from handycalc.running_sum import running_sums
from handycalc.matrix import format_matrix
from handycalc.range_sum import range_sum
from handycalc.file_stats import calculate_statistics, read_numbers, write_statistics

celsius_to_fahrenheit(100)              # 212.0
str(parse_time("7 5"))                  # "07:05"
calculate_bmi(180, 81)                  # about 25.0
IntegerCalculator(-17, 5).divide()      # -3 (truncates toward zero)
IntegerCalculator(-17, 5).remainder()   # -2
fuel_efficiency(400, 30)                # 7.5
list(running_sums([3, 4, 0, 9]))        # [(3, 3), (4, 7)]
format_matrix([[1, 2], [3, 4]])         # "1\t2\t\n3\t4\t\n"
range_sum(10, 1)                        # 55

stats = calculate_statistics([1.0, 2.0, 3.0])
stats.count, stats.total, stats.average  # (3, 6.0, 2.0)
print(stats.report("numbers.txt"))
```

`read_numbers` reads whitespace-separated numbers from an open text stream and
stops at the first piece of text that is not a number. `write_statistics(path,
filename, stats)` writes the report to `path`.

Invalid input raises `ValueError`: a temperature outside -273.15 to 572.65 °C,
a time outside 00:00–23:59, a zero height or distance, or division by zero.

## Running the tests

```
pip install .[test]
pytest
```