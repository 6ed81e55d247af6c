"""Montgomery modular arithmetic over fixed-width unsigned integers.

Residues are kept in Montgomery form ``a * R mod N`` with ``R = 2**bits``,
so that products can be reduced with shifts and masks instead of division.

Python integers never overflow, so every ``bits``-wide operation is masked
explicitly. The double-width product of two residues plays the role of the
wider accumulator type.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Montgomery:
    """Montgomery context for a single odd modulus.

    Args:
        modulo: Odd modulus ``N`` representable in ``bits`` bits.
        bits: Word width ``W``; ``R = 2**W``.

    Attributes:
        modulo_inv: ``N'`` with ``N * N' == 1 (mod 2**W)``.
        r: ``2**W mod N``, the Montgomery form of 1.
        r2: ``(2**W)**2 mod N``, used by :meth:`convert`.

    Raises:
        ValueError: If ``modulo`` is even, zero or wider than ``bits``.
    """

    modulo: int
    bits: int = 64
    modulo_inv: int = field(init=False)
    r: int = field(init=False)
    r2: int = field(init=False)
    mask: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.bits < 1:
            raise ValueError(f"bits must be >= 1, got {self.bits}")
        if self.modulo <= 0 or self.modulo & 1 == 0:
            raise ValueError(f"Modulus must be odd and positive, got {self.modulo}")
        if self.modulo >> self.bits:
            raise ValueError(f"Modulus {self.modulo} does not fit in {self.bits} bits")

        mask = (1 << self.bits) - 1
        modulo = self.modulo

        r = (1 << self.bits) % modulo
        r2 = r * r % modulo

        # Newton iteration; every odd N is its own inverse mod 8, and each
        # step doubles the number of correct low bits.
        inv = modulo
        while (modulo * inv) & mask != 1:
            inv = (inv * (2 - modulo * inv)) & mask

        object.__setattr__(self, "mask", mask)
        object.__setattr__(self, "modulo_inv", inv)
        object.__setattr__(self, "r", r)
        object.__setattr__(self, "r2", r2)

    def multiply(self, lhs: int, rhs: int) -> int:
        """Return ``lhs * rhs / R mod N`` for operands in Montgomery form."""
        product = lhs * rhs
        high = product >> self.bits
        m = ((product & self.mask) * self.modulo_inv) & self.mask
        correction = (m * self.modulo) >> self.bits
        # high - correction lies in (-N, N); wrap and add N back on borrow.
        result = (high - correction) & self.mask
        if high < correction:
            result = (result + self.modulo) & self.mask
        return result

    def reduce(self, value: int) -> int:
        """Map a residue out of Montgomery form (``value / R mod N``)."""
        return self.multiply(value, 1)

    def convert(self, value: int) -> int:
        """Map an ordinary residue ``value < N`` into Montgomery form."""
        return self.multiply(value, self.r2)

    def pow(self, value: int, exp: int) -> int:
        """Raise ``value`` (Montgomery form) to ``exp`` by square-and-multiply.

        The result is in Montgomery form; ``exp == 0`` yields :attr:`r`.
        """
        if exp < 0:
            raise ValueError(f"Exponent must be >= 0, got {exp}")

        res = self.r
        while exp > 0:
            if exp & 1:
                res = self.multiply(res, value)
            value = self.multiply(value, value)
            exp >>= 1
        return res

    @property
    def one(self) -> int:
        """Montgomery form of 1."""
        return self.r

    @property
    def minus_one(self) -> int:
        """Montgomery form of ``N - 1``."""
        return self.modulo - self.r
