# floatkit

A small, dependency-free library of tools for IEEE 754 double precision
numbers. It also has a handful of array helpers and root-bracketing steps.

## Installation

```
pip install floatkit
```

To run the test suite, install the test extra and run pytest:

```
pip install "floatkit[test]"
pytest
```

## Modules

### `floatkit.floatops`: inspecting and adjusting floats

- `chgsign(x)` flips the sign bit of `x`. `copysign(x, y)` gives the magnitude of `x` with the sign of `y`. `fabs(x)` gives the absolute value.
- `finite(x)` and `isnan(x)` test a value, and `nan()` returns a quiet NaN. `fpclass(x)` returns an `FPClass` member that tells signalling or quiet NaN, infinity, normal, denormal and zero apart, each with its sign.
- `frexp(x)` returns `(sig, exp)` with `x == sig * 2**exp`. `ldexp(sig, exp)` joins them back, and overflow gives a signed infinity. `logb(x)` returns the unbiased binary exponent as a float. It returns `-inf` for zero and `inf` for infinities.
- `nextafter(x, n)` steps `n` representable values up (`n > 0`) or down (`n < 0`) from `x`.
- `ulp(x, y)` counts the representable steps from `y` to `x`, so `ulp(nextafter(x, n), x) == n`.
- `float_bits(x)` returns the 64 bits of a double as a list of 0s and 1s, sign bit first. `bits_float(bits)` turns 64 bits back into the float, and any entry that is not zero counts as a one. It raises `ValueError` if it is not given exactly 64 entries.
- `popcount(x)` counts the one bits in the 64-bit representation of `x`. `popcount_int(i)` counts them in a non-negative integer, and raises `ValueError` for a negative one.
- `remquo(numer, denom)` returns the IEEE remainder and the signed low bits of the rounded quotient.
- `arcosh(x)` is the inverse hyperbolic cosine. It returns NaN when `x < 1`.

```python
from floatkit.floatops import nextafter, ulp, float_bits, bits_float, remquo

y = nextafter(1.0, 3)
assert ulp(y, 1.0) == 3
assert bits_float(float_bits(-2.5)) == -2.5
assert remquo(-10.0, 3.0) == (-1.0, -3)
```

### `floatkit.limits`: numeric limits

`constants()` returns a new dictionary each time it is called. It holds the
C integer limits (`CHAR_BIT`, `INT_MAX`, `SHRT_MIN`, ...), the double and
single precision limits (`DBL_EPSILON`, `DBL_MAX`, `FLT_MAX`, ...), the
`FPCLASS_*` codes, and the special values `SNAN`, `QNAN` and `PINF`. `FPClass`
is the integer enum of classification codes that `fpclass` returns.

### `floatkit.functional`: scalar operations

- `add`, `sub`, `mul` and `div` are the four arithmetic operations. `div` follows IEEE rules for a zero divisor: it gives a signed infinity, or NaN for `0/0`.
- `fmod(x1, x2)` is the C-style floating remainder. It returns NaN when `x2` is zero.
- `mod(x1, x2)` is a truncating integer remainder whose sign follows `x1`, unlike Python's `%`. A zero divisor raises `ValueError`.
- `bit_not`, `bit_and`, `bit_or`, `bit_xor` and `shift` work on unsigned 16-bit words and raise `ValueError` for values out of range. `shift(x, n)` shifts left for positive `n` and right for negative `n`.
- `equals(x1, x2)` and `identity(x)` complete the set.

### `floatkit.arrays`: array utilities

- `array_set(array)` stores a copy of an array and returns an integer handle. `array_get(handle)` returns a copy of that array, and raises `LookupError` for an unknown handle. The store is in memory and lasts only for the life of the process.
- `array_apply(f, x, y=None)` returns `[f(xi)]`, or the matrix `[[f(xi, yj)]]` when `y` is given.
- `array_interval(start, stop, step)` builds points from `start` to `stop`. A `step` of at most 1 is used as the increment. A larger `step` is the number of equally spaced points.
- `array_slice(array, start, stride, count)` takes every `stride`-th element from `start`. A zero stride means 1, and a zero count takes everything available.
- `array_sort(array, n)` sorts in ascending order. With `n` equal to 0 or -1 it sorts the whole array. With any other `n` it puts the `|n|` smallest elements first, in order, and leaves the rest in their original order.
- `array_grade(array, n)` returns indices. With `n == 0` they give ascending order, and with `n == -1` descending order. Other values grade only the first `|n|` positions, ascending for positive `n` and descending for negative `n`.
- `array_random(rows, columns, low=0.0, high=0.0)` returns a matrix of uniform random numbers in `[low, high)`. When both bounds are zero the range is `[0, 1)`.
- `polynomial(coefficients, x)` evaluates `c[0] + c[1]*x + ...` by Horner's method.
- `reverse(array)` returns the elements in reverse order.

### `floatkit.root1d`: bracketing a root

- `bisect(f, x0, x1)` halves the bracket `[x0, x1]` and returns the half that still holds a root. It raises `ValueError` if `x0 > x1` or if the root is not bracketed.
- `secant(f, x0, x1)` returns where the secant line through the two points crosses zero.
- `false_position(f, x0, x1)` narrows the bracket at the secant point.
- `kahan_a(x)` evaluates the test function `6x - x**4 - 1`.

```python
from floatkit.root1d import bisect, kahan_a

lo, hi = bisect(kahan_a, 0.0, 1.0)
assert (lo, hi) == (0.0, 0.5)
```

## What it does not do

floatkit is a library only. It has no command-line program. Each root-finding
function performs a single step, so to find a root you call it repeatedly.
Arrays stored with `array_set` are not saved anywhere.