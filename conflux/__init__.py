"""Set reconciliation over finite fields: bitstrings, matrices, polynomials, interpolation, factoring and prime generation."""

__version__ = "0.1.0"
__all__ = ["bitstring", "matrix", "poly", "decode", "primegen"]