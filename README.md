# csdkit

A collection of small, self-contained helpers:

- `csdkit.numberutil` – primes (`is_prime`, `get_prime`), digit counting,
  `max3`/`min3`, fraction simplification (`simplify`) and spelling
  non-negative numbers out in Turkish (`number_to_text_tr`).
- `csdkit.bitwise` – setting, clearing and counting bits of 32-bit values.
- `csdkit.dates` – leap years, date validation (from 1900 onwards), day of
  year and day of week, weekend checks and formatted dates in Turkish and
  English (`format_date_tr`, `format_date_en`).
- `csdkit.sequtil` – sequence and string helpers: `max_value`, `max_index`,
  `average`, `bubble_sort`, `char_count`, `concat_strings`, `random_ints`,
  `random_text` and more.
- `csdkit.dynamic_array` – `DynamicArray`, a growable array with explicit
  capacity that doubles when full.
- `csdkit.fixed_array` – `FixedArray`, a fixed-length array whose `at`
  method is bounds-checked.
- `csdkit.complex_number` – `Complex`, with tolerance-based equality.
- `csdkit.fraction` – `Fraction`, kept in lowest terms with a positive
  denominator.
- `csdkit.quadratic` – `solve_quadratic`, the real roots of a quadratic.
- `csdkit.geometry` – `Point`, `Circle` and `AnalyticalCircle`.
- `csdkit.company` – `Employee`, `Manager`, `SalesManager`, `Worker` and
  `HumanResources`, which prints insurance payments.
- `csdkit.sensor` – `Sensor`, with a shared count of open sensors.
- `csdkit.alert` – `AlertDialog`, built with chained setters and rendered
  as text.
- `csdkit.textfile` – `TextFile`, a character-oriented file wrapper usable
  as a context manager.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from csdkit.numberutil import is_prime, number_to_text_tr
from csdkit.bitwise import count_set_bits
from csdkit.dates import is_leap_year
from csdkit.fraction import Fraction
from csdkit.complex_number import Complex
from csdkit.quadratic import solve_quadratic
from csdkit.dynamic_array import DynamicArray

is_prime(1_000_003)          # True
number_to_text_tr(123)       # 'yuz yirmi uc'
count_set_bits(0b1011)       # 3
is_leap_year(2024)           # True

float(Fraction(6, 8))        # 0.75
Complex(3, 4).norm()         # 5.0
solve_quadratic(1, -3, 2)    # (2.0, 1.0)

arr = DynamicArray(2)
for value in (10, 20, 30):
    arr.append(value)
len(arr)                     # 3
list(arr)                    # [10, 20, 30]
```

## Commands

Two small programs are installed with the package:

- `csdkit-simplify` – reads numerator and denominator pairs from standard
  input and prints each simplified fraction; the pair `0 0` or the end of
  input stops it. With `--primes` it instead lists the primes up to 100 and
  says whether 1000003 is prime.
- `csdkit-showfile [PATH]` – prints the contents of a file twice, rewinding
  in between; `PATH` defaults to `test.dat`.

## What it does not do

The package has no general random-value or string-to-number conversion
helpers beyond those in `csdkit.sequtil`, no playing-card deck, no
interactive number prompts, and no command for counting letters or digits
in text.