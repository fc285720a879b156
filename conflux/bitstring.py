"""Fixed-length bit sequences, most significant bit first within each byte."""

from __future__ import annotations


class Bitstring:
    """A sequence of bits backed by a byte buffer."""

    def __init__(self, bits: int) -> None:
        if bits < 0:
            raise ValueError("bit length must not be negative")
        self._bits = bits
        self._buf = bytearray((bits + 7) // 8)

    @classmethod
    def from_zp(cls, value: int, p: int) -> Bitstring:
        """Build a bitstring from a field element of Z(p), stored little-endian."""
        bs = cls(p.bit_length())
        value %= p
        bs.set_bytes(value.to_bytes((value.bit_length() + 7) // 8, "little"))
        return bs

    def bit_len(self) -> int:
        """Number of bits in the bitstring."""
        return self._bits

    def byte_len(self) -> int:
        """Number of bytes the bitstring occupies."""
        return len(self._buf)

    def _locate(self, bit: int) -> tuple[int, int]:
        if bit > self._bits or bit < 0:
            raise IndexError("bit index out of range")
        byte_pos, bit_pos = divmod(bit, 8)
        if byte_pos >= len(self._buf):
            raise IndexError("bit index out of range")
        return byte_pos, 1 << (7 - bit_pos)

    def get(self, bit: int) -> int:
        """Return the bit value (0 or 1) at the given position."""
        byte_pos, mask = self._locate(bit)
        return 1 if self._buf[byte_pos] & mask else 0

    def set(self, bit: int) -> None:
        """Set the bit at the given position to 1."""
        byte_pos, mask = self._locate(bit)
        self._buf[byte_pos] |= mask

    def clear(self, bit: int) -> None:
        """Clear the bit at the given position to 0."""
        byte_pos, mask = self._locate(bit)
        self._buf[byte_pos] &= ~mask & 0xFF

    def flip(self, bit: int) -> None:
        """Invert the bit at the given position."""
        byte_pos, mask = self._locate(bit)
        self._buf[byte_pos] ^= mask

    def set_bytes(self, buf: bytes) -> None:
        """Load bits from a buffer; missing bytes are zero, excess bits are dropped."""
        size = len(self._buf)
        data = bytes(buf[:size])
        self._buf[:] = data + bytes(size - len(data))
        byte_pos, bit_pos = divmod(self._bits, 8)
        if bit_pos:
            self._buf[byte_pos] &= ~((1 << (8 - bit_pos)) - 1) & 0xFF

    def _load_int(self, value: int) -> None:
        self.set_bytes(value.to_bytes((value.bit_length() + 7) // 8, "big"))

    def lsh(self, n: int) -> None:
        """Shift all bits left by n positions."""
        self._load_int(int.from_bytes(self._buf, "big") << n)

    def rsh(self, n: int) -> None:
        """Shift all bits right by n positions."""
        self._load_int(int.from_bytes(self._buf, "big") >> n)

    def to_bytes(self) -> bytes:
        """Return a copy of the underlying buffer."""
        return bytes(self._buf)

    def __len__(self) -> int:
        return self._bits

    def __str__(self) -> str:
        return "".join(str(self.get(i)) for i in range(self._bits))

    def __repr__(self) -> str:
        return f"Bitstring({str(self)!r})"