"""Generate large primes just above common bit lengths and print them as byte literals."""

from __future__ import annotations

import argparse
import secrets
from typing import Sequence

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47)
_BIT_LENGTHS = (128, 160, 256, 512)


def is_probable_prime(n: int, rounds: int = 20) -> bool:
    """Miller-Rabin primality test with the given number of random bases."""
    if n < 2:
        return False
    for sp in _SMALL_PRIMES:
        if n == sp:
            return True
        if n % sp == 0:
            return False
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for _ in range(rounds):
        a = 2 + secrets.randbelow(n - 3)
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def random_prime(bits: int) -> int:
    """Return a random prime of exactly the given bit length, top two bits set."""
    if bits < 2:
        raise ValueError("prime size must be at least 2-bit")
    while True:
        candidate = secrets.randbits(bits) | (3 << (bits - 2)) | 1
        if is_probable_prime(candidate):
            return candidate


def format_prime(n: int, value: int) -> str:
    """Render a prime as a named byte-slice declaration."""
    data = value.to_bytes((value.bit_length() + 7) // 8, "big")
    parts = [f"var p_{n} = big.NewInt(0).SetBytes([]byte{{"]
    for i, b in enumerate(data):
        if i > 0:
            parts.append(",")
        if i < len(data) - 1 and i % 8 == 0:
            parts.append("\n\t")
        parts.append(f"0x{b:x}")
    parts.append("})\n\n")
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Print one prime of n+1 bits for each standard bit length n."""
    parser = argparse.ArgumentParser(
        prog="primegen",
        description="Generate large primes bounding common bit lengths.",
    )
    parser.parse_args(argv)
    for n in _BIT_LENGTHS:
        print(format_prime(n, random_prime(n + 1)), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())