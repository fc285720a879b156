"""Polynomials with coefficients in the finite field Z(p)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


class FieldMismatchError(ValueError):
    """Raised when polynomials over different fields are combined."""


class PolyDivisionError(ArithmeticError):
    """Raised when polynomial division cannot proceed."""


class Poly:
    """An immutable polynomial over Z(p), coefficients in ascending degree."""

    __slots__ = ("_coeffs", "_degree", "_p")

    def __init__(self, coeffs: Iterable[int], p: int) -> None:
        self._p = p
        self._coeffs = tuple(c % p for c in coeffs)
        self._degree = max(
            (i for i, c in enumerate(self._coeffs) if c), default=0
        )

    @classmethod
    def empty(cls, p: int) -> Poly:
        """Return a polynomial with no coefficients in Z(p)."""
        return cls((), p)

    @property
    def degree(self) -> int:
        """Highest exponent with a non-zero coefficient."""
        return self._degree

    @property
    def coeffs(self) -> tuple[int, ...]:
        """Coefficients in ascending degree order."""
        return self._coeffs

    @property
    def p(self) -> int:
        """Modulus of the coefficient field."""
        return self._p

    def copy(self) -> Poly:
        """Return an equal polynomial."""
        return Poly(self._coeffs, self._p)

    def _check_field(self, other: Poly) -> None:
        if self._p != other._p:
            raise FieldMismatchError(
                f"expected finite field Z({other._p}), was Z({self._p})"
            )

    def _terms(self) -> tuple[int, ...]:
        return self._coeffs[: self._degree + 1]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Poly):
            return NotImplemented
        self._check_field(other)
        return self._degree == other._degree and self._terms() == other._terms()

    def __hash__(self) -> int:
        return hash((self._p, self._terms()))

    def __add__(self, other: Poly) -> Poly:
        if not isinstance(other, Poly):
            return NotImplemented
        self._check_field(other)
        degree = max(self._degree, other._degree)
        a, b = self._terms(), other._terms()
        total = [
            (a[i] if i < len(a) else 0) + (b[i] if i < len(b) else 0)
            for i in range(degree + 1)
        ]
        return Poly(total, self._p)

    def __neg__(self) -> Poly:
        return Poly((-c for c in self._coeffs), self._p)

    def __sub__(self, other: Poly) -> Poly:
        if not isinstance(other, Poly):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: Poly) -> Poly:
        if not isinstance(other, Poly):
            return NotImplemented
        self._check_field(other)
        product = [0] * (self._degree + other._degree + 1)
        for i, a in enumerate(self._terms()):
            for j, b in enumerate(other._terms()):
                product[i + j] += a * b
        return Poly(product, self._p)

    def is_constant(self, c: int) -> bool:
        """Return whether the polynomial is the constant c."""
        return self._degree == 0 and bool(self._coeffs) and self._coeffs[0] == c % self._p

    def eval(self, z: int) -> int:
        """Evaluate the polynomial at z."""
        result = 0
        for c in reversed(self._terms()):
            result = (result * z + c) % self._p
        return result

    def __str__(self) -> str:
        parts = []
        for i in range(len(self._coeffs) - 1, -1, -1):
            c = self._coeffs[i]
            if not c:
                continue
            parts.append(f"{c}z^{i}" if i > 0 else f"{c}")
        return " + ".join(parts)

    def __repr__(self) -> str:
        return f"Poly({list(self._coeffs)!r}, {self._p})"


def poly_term(degree: int, c: int, p: int) -> Poly:
    """Return the single-term polynomial c*z^degree."""
    return Poly([0] * degree + [c], p)


def poly_divmod(x: Poly, y: Poly) -> tuple[Poly, Poly]:
    """Return the quotient and remainder of x divided by y."""
    x._check_field(y)
    p = x.p
    zero = Poly([0], p)
    terms = []
    current = x
    while True:
        if current.is_constant(0):
            remainder = zero
            break
        if y.degree > current.degree:
            remainder = current
            break
        lead = y.coeffs[y.degree] if y.coeffs else 0
        if lead == 0:
            raise PolyDivisionError("division by zero polynomial")
        c = current.coeffs[current.degree] * pow(lead, -1, p)
        m = poly_term(current.degree - y.degree, c, p)
        reduced = current - m * y
        if not (reduced.degree < current.degree or current.degree == 0):
            raise PolyDivisionError("divmod error")
        terms.append(m)
        current = reduced
    quotient = zero
    for m in reversed(terms):
        quotient = quotient + m
    return quotient, remainder


def poly_div(x: Poly, y: Poly) -> Poly:
    """Return the quotient of x divided by y."""
    return poly_divmod(x, y)[0]


def poly_mod(x: Poly, y: Poly) -> Poly:
    """Return the remainder of x divided by y."""
    return poly_divmod(x, y)[1]


def poly_gcd(x: Poly, y: Poly) -> Poly:
    """Return the monic greatest common divisor of x and y."""
    while not y.is_constant(0):
        x, y = y, poly_mod(x, y)
    lead = x.coeffs[x.degree] if x.coeffs else 0
    if lead == 0:
        raise PolyDivisionError("gcd of zero polynomials")
    return x * Poly([pow(lead, -1, x.p)], x.p)


@dataclass
class RationalFn:
    """The ratio of two polynomials."""

    num: Poly
    denom: Poly