"""Set reconciliation by rational function interpolation and factoring over Z(p)."""

from __future__ import annotations

import secrets
from typing import Sequence

from .matrix import Matrix
from .poly import Poly, PolyDivisionError, RationalFn, poly_div, poly_gcd, poly_mod

P_SKS = 530512889551602322505127520352579437339
"""Prime modulus of the field used by SKS-compatible reconciliation."""


class InterpolationError(ValueError):
    """Raised when rational function interpolation cannot be performed."""

    def __init__(self, message: str = "interpolation failed") -> None:
        super().__init__(message)


class LowMBarError(ValueError):
    """Raised when there are too few sample points to reconcile the sets."""

    def __init__(self, message: str = "low MBar") -> None:
        super().__init__(message)


class PowModSmallNError(ValueError):
    """Raised when a modular power is requested for a too-small exponent."""

    def __init__(self, message: str = "PowMod not implemented for small values of N") -> None:
        super().__init__(message)


class FactorError(ValueError):
    """Raised when a polynomial does not split into linear factors."""


def interpolate(
    values: Sequence[int], points: Sequence[int], deg_diff: int, p: int
) -> RationalFn:
    """Recover the reduced rational function matching values at the sample points."""
    values = [v % p for v in values]
    points = [z % p for z in points]
    if not values or abs(deg_diff) > len(values):
        raise InterpolationError()
    if len(points) < len(values):
        raise InterpolationError("fewer sample points than values")
    mbar = len(values)
    if (mbar + deg_diff) % 2:
        mbar -= 1
    ma = (mbar + deg_diff) // 2
    mb = (mbar - deg_diff) // 2
    matrix = Matrix(mbar + 1, mbar, 0, p)
    for j, (kj, fj) in enumerate(zip(points[:mbar], values[:mbar])):
        accum = 1
        for i in range(ma):
            matrix.set(i, j, accum)
            accum = accum * kj % p
        kjma = accum
        accum = -fj % p
        for i in range(ma, mbar):
            matrix.set(i, j, accum)
            accum = accum * kj % p
        matrix.set(mbar, j, -accum - kjma)
    matrix.reduce()
    apoly = Poly([matrix.get(mbar, j) for j in range(ma)] + [1], p)
    bpoly = Poly([matrix.get(mbar, j + ma) for j in range(mb)] + [1], p)
    g = poly_gcd(apoly, bpoly)
    return RationalFn(poly_div(apoly, g), poly_div(bpoly, g))


def poly_pow_mod(f: Poly, n: int, g: Poly) -> Poly:
    """Compute f**n modulo g by repeated squaring."""
    if n.bit_length() < 3:
        raise PowModSmallNError()
    h = Poly([1], f.p)
    while True:
        if n & 1:
            h = poly_mod(h * f, g)
            n -= 1
        n >>= 1
        if n == 0:
            return h
        f = poly_mod(f * f, g)


def poly_rand(p: int, degree: int) -> Poly:
    """Return a random monic polynomial of the given degree over Z(p)."""
    return Poly([secrets.randbelow(p) for _ in range(degree)] + [1], p)


def _split(poly: Poly) -> list[Poly]:
    """Cantor-Zassenhaus equal-degree factorisation into linear factors."""
    factors = [poly]
    if poly.degree <= 1:
        return factors
    p = poly.p
    one = Poly([1], p)
    while len(factors) < poly.degree:
        r = poly_rand(p, 2 * poly.degree - 1)
        h = poly_pow_mod(r, p // 2, poly)
        g = poly_gcd(poly, h - one)
        if g != one and g != poly:
            factors = _split(g) + _split(poly_div(poly, g))
    return factors


def factor(poly: Poly) -> set[int]:
    """Return the roots of a polynomial that is a product of monic linear factors."""
    roots: set[int] = set()
    for f in _split(poly):
        if f.degree == 0 and f.coeffs and f.coeffs[0] == 1:
            continue
        if f.degree != 1:
            raise FactorError(f"invalid factor: ({f})")
        roots.add(-f.coeffs[0] % poly.p)
    return roots


def factor_check(poly: Poly) -> bool:
    """Return whether the polynomial can be split into linear factors."""
    if poly.degree <= 1:
        return True
    z = Poly([0, 1], poly.p)
    try:
        zq = poly_pow_mod(z, P_SKS, poly)
        zqmz = poly_mod(zq - z, poly)
    except (PowModSmallNError, PolyDivisionError):
        return False
    return zqmz.degree == 0 or (zqmz.degree == 1 and zqmz.coeffs[0] == 0)


def zpoints(p: int, n: int) -> list[int]:
    """Return n sample points 0, -1, 1, -2, 2, ... in Z(p)."""
    return [((i + 1) // 2 if i % 2 == 0 else -((i + 1) // 2)) % p for i in range(n)]


def reconcile(
    values: Sequence[int], points: Sequence[int], deg_diff: int, p: int
) -> tuple[set[int], set[int]]:
    """Return the elements held only locally and only remotely."""
    if not values or not points:
        raise InterpolationError()
    rfn = interpolate(values[:-1], points[:-1], deg_diff, p)
    last_point = points[-1] % p
    denom_at = rfn.denom.eval(last_point)
    if denom_at == 0:
        raise LowMBarError()
    value_from_poly = rfn.num.eval(last_point) * pow(denom_at, -1, p) % p
    if (
        value_from_poly != values[-1] % p
        or not factor_check(rfn.num)
        or not factor_check(rfn.denom)
    ):
        raise LowMBarError()
    return factor(rfn.num), factor(rfn.denom)