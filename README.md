# conflux

Core mathematics for set reconciliation between two peers, after the
scheme of Minsky, Trachtenberg and Zippel: each side evaluates the
characteristic polynomial of its set at shared sample points, and from the
ratio of those values the elements present on only one side are recovered.

Field elements are plain Python integers taken modulo a prime `p`.

## Modules

- `conflux.bitstring.Bitstring` — a fixed-length bit sequence, most
  significant bit first within each byte. It offers `get`, `set`, `clear`,
  `flip`, `set_bytes`, `lsh`, `rsh`, `to_bytes`, `bit_len`, `byte_len`,
  `len()` and `str()` (a string of `0`/`1`). `Bitstring.from_zp(value, p)`
  builds one of `p.bit_length()` bits from the little-endian bytes of
  `value mod p`. Out-of-range bit positions raise `IndexError`.
- `conflux.matrix.Matrix` — a matrix over Z(p), addressed as
  `get(column, row)` / `set(column, row, value)`, with in-place Gaussian
  elimination in `reduce()`. A matrix with fewer columns than rows raises
  `MatrixTooNarrowError`.
- `conflux.poly.Poly` — immutable polynomials over Z(p), built from
  coefficients in ascending degree (`Poly([4, 3, 2], p)` is
  `2z^2 + 3z^1 + 4`). They support `+`, `-`, unary `-`, `*`, `==`,
  `eval(z)`, `is_constant(c)`, `copy()` and the properties `degree`,
  `coeffs` and `p`; `Poly.empty(p)` has no coefficients. Module functions
  `poly_term`, `poly_divmod`, `poly_div`, `poly_mod` and `poly_gcd` (monic
  result) complete the arithmetic, and `RationalFn` holds a `num`/`denom`
  pair. Mixing fields raises `FieldMismatchError`; impossible divisions
  raise `PolyDivisionError`.
- `conflux.decode` — `interpolate`, `poly_pow_mod`, `poly_rand`, `factor`
  (roots of a product of linear factors, as a `set`), `factor_check`,
  `zpoints` (sample points `0, -1, 1, -2, 2, ...`) and `reconcile`, which
  turns sample values into the two difference sets. `P_SKS` is the prime
  modulus of the field used for reconciliation.
- `conflux.primegen` — random prime generation (`random_prime`,
  `is_probable_prime`) and the `conflux-primegen` command.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from conflux.decode import P_SKS, reconcile, zpoints

p = P_SKS
points = zpoints(p, 6)

ours = {3, 10}
theirs = {42}

def sample(elements, z):
    value = 1
    for e in elements:
        value = value * (z - e) % p
    return value

values = [
    sample(ours, z) * pow(sample(theirs, z), -1, p) % p
    for z in points
]
only_ours, only_theirs = reconcile(values, points, len(ours) - len(theirs), p)
# only_ours == {3, 10}, only_theirs == {42}
```

The last value and point are held back to check the interpolated rational
function. If too few sample points were used for the size of the
difference, `reconcile` raises `conflux.decode.LowMBarError`; interpolation
failures raise `InterpolationError`, and a polynomial that does not split
into linear factors raises `FactorError`.

`factor_check` tests splitting with the exponent `P_SKS`, so `reconcile`
is meant for the field Z(`P_SKS`).

## Generating field primes

The `conflux-primegen` command prints random primes of 129, 161, 257 and
513 bits (each with its top two bits set), formatted as byte listings
suitable for embedding as field moduli:

```
conflux-primegen
```

## What this package does not do

It holds only the mathematics. There is no prefix tree of set elements, no
storage of such a tree, and no network protocol for exchanging sample
values with a peer; callers supply the sample values and points themselves.