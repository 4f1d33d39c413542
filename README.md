# physkit

Small building blocks for physics and numerical codes: exact rational
arithmetic, scaling factors, string helpers, tridiagonal solvers and
column-wise linear interpolation. The only runtime dependency is numpy.

## Installation

```
pip install physkit
```

To run the test suite, install the test extra and run pytest:

```
pip install "physkit[test]"
pytest
```

## Modules

- `physkit.rational`: `RationalConstant`, an exact fraction always kept in
  lowest terms with a positive denominator. It supports `+ - * /`, unary
  minus, integer powers (`**` or `power(x, p)`), and comparison with other
  rationals and integers. Only integers may build one; a zero denominator
  raises `ZeroDivisionError` and `0^0` raises `ValueError`.
  `to_string(fmt)` renders it as `Format.RAT` (`"3/2"`) or `Format.FLOAT`
  (`"1.5"`).
- `physkit.scaling`: `ScalingFactor`, an exact value `base^exp` with
  rational base and exponent, with `*`, `/`, `power(x, p)` and `sqrt(x)`.
  `0^0` and even roots of negative bases raise `ValueError`, and any `x^0` is
  stored as `1^1`. The SI prefixes `NANO`, `MICRO`, `MILLI`, `CENTI`, `HECTO`,
  `KILO`, `MEGA` and `GIGA` are provided.
- `physkit.math_utils`: `is_invalid` (NaN test for floats and float
  arrays), `rel_diff(a, b)` = `|b - a| / |a|`, and `transpose`, which
  reorders flat 2-D or 3-D data between C and Fortran order
  (`TransposeDirection.C2F` / `F2C`).
- `physkit.factory`: `Factory`, a registry of creator callables by key,
  with `register_product`, `create`, `has_product`, `register_size` and
  `clean_up`. `create` raises `LookupError` when nothing is registered or
  the key is unknown.
- `physkit.strings`: `strip`, `split`, `starts_with`, `trim`, `strint`,
  `upper_case`, `join`, `join_if`, `valid_nested_list_format` and
  `parse_nested_list`.
- `physkit.testargs`: `TestSession.parse_test_args` for `-f`,
  `--key value`, `--key v1 v2` and `--key=v1,v2` style arguments,
  `argv_matches`, and `get_test_device`, which picks a device id from
  CTest resource-group environment variables (or returns `-1` when none are
  set).
- `physkit.tridiag_thomas`: `thomas`, the Thomas algorithm.
- `physkit.tridiag_cr`: `cr`, cyclic reduction, with the rows of each
  level shared among `nthreads` workers; the answer does not depend on
  `nthreads`.
- `physkit.tridiag_bfb`: `bfb`, a Thomas variant in which every
  right-hand side gets bit-identical answers however many are solved
  together.
- `physkit.lin_interp`: `LinInterp`, which builds a per-column index map
  with `setup` and then interpolates any number of fields with
  `lin_interp`; and `upper_bound`.

All three tridiagonal solvers take the lower diagonal `dl` (used from row
1), the diagonal `d` and the upper diagonal `du` (used up to the second last
row), plus right-hand sides `x`. Accepted layouts: 1-D diagonals with 1-D
`x`; 1-D diagonals with `x` of shape `(nrow, nrhs)`; or 2-D diagonals of
shape `(nrow, nrhs)`, matrix `j` solving column `j`. Float ndarrays are
worked on in place (`x` receives the solution, the diagonals are
overwritten); the solution is also returned.

## Examples

```python
from physkit.rational import Format, RationalConstant

r = RationalConstant(6, 4)
r.to_string()              # "3/2"
r.to_string(Format.FLOAT)  # "1.5"
```

```python
from physkit.scaling import KILO, MILLI, ScalingFactor

KILO.to_string()                     # "10^3"
KILO * MILLI == ScalingFactor.one()  # True
```

```python
from physkit.math_utils import TransposeDirection, transpose

transpose([1, 2, 3, 4, 5, 6], TransposeDirection.C2F, 2, 3)
# array([1, 4, 2, 5, 3, 6])
```

```python
from physkit.strings import parse_nested_list

info = parse_nested_list("[a,[b,c],d]")
info["Num Entries"]  # 3
info["Depth"]        # 2
info["Type 1"]       # "List"
```

```python
from physkit.testargs import TestSession

ts = TestSession()
ts.parse_test_args(["--verbose", "--n=4", "--files", "a", "b"])
ts.flags       # {"verbose": True}
ts.params      # {"n": "4"}
ts.vec_params  # {"n": ["4"], "files": ["a", "b"]}
```

```python
import numpy as np
from physkit.tridiag_thomas import thomas

dl = np.array([0.0, 1.0, 1.0])
d = np.array([4.0, 4.0, 4.0])
du = np.array([1.0, 1.0, 0.0])
x = np.array([5.0, 6.0, 5.0])
thomas(dl, d, du, x)  # x now holds the solution [1, 1, 1]
```

```python
from physkit.lin_interp import LinInterp

li = LinInterp(ncol=1, km1=3, km2=2)
x1, x2 = [0.0, 1.0, 2.0], [0.5, 1.5]
li.setup(0, x1, x2)
li.lin_interp(0, x1, x2, [0.0, 10.0, 20.0])  # array([ 5., 15.])
```

## What it does not do

physkit has no physical-units type: scaling factors carry no dimensions, and
there is nothing that combines units such as metres and seconds. It also has
no string similarity measures (Jaro, Jaro-Winkler, Jaccard) and no
case-insensitive string type. It provides no command-line program.