"""Tests for Montgomery modular arithmetic."""

import pytest

from primality_test.core.montgomery import Montgomery


MODULI = [
    (3, 8),
    (251, 8),
    (255, 8),
    (65521, 16),
    (998244353, 32),
    (4294967291, 32),
    (1000000007, 64),
    (999999999999999989, 64),
    (18446744073709551557, 64),
]


class TestConstruction:
    """Tests for Montgomery context construction."""

    @pytest.mark.parametrize("modulo,bits", MODULI)
    def test_parameters_consistent(self, modulo, bits):
        """Test that r, r2 and modulo_inv are derived correctly from N."""
        mont = Montgomery(modulo, bits)
        R = 1 << bits
        assert mont.r == R % modulo
        assert mont.r2 == (R * R) % modulo
        assert (modulo * mont.modulo_inv) % R == 1
        assert 0 <= mont.modulo_inv < R

    def test_even_modulus_rejected(self):
        """Test that even moduli raise ValueError."""
        with pytest.raises(ValueError):
            Montgomery(10, 8)

    def test_zero_modulus_rejected(self):
        """Test that a zero modulus raises ValueError."""
        with pytest.raises(ValueError):
            Montgomery(0, 32)

    def test_modulus_too_wide(self):
        """Test that a modulus wider than the word raises ValueError."""
        with pytest.raises(ValueError):
            Montgomery(257, 8)

    def test_immutable(self):
        """Test that the context cannot be modified."""
        mont = Montgomery(97, 32)
        with pytest.raises(AttributeError):
            mont.modulo = 101


class TestArithmetic:
    """Tests for multiply, convert, reduce and pow."""

    @pytest.mark.parametrize("modulo,bits", MODULI)
    def test_multiply_is_montgomery_product(self, modulo, bits):
        """Test multiply(a, b) == a * b * R^-1 mod N."""
        mont = Montgomery(modulo, bits)
        r_inv = pow(1 << bits, -1, modulo)
        for a, b in [(0, 0), (1, 1), (2, modulo - 1), (modulo - 1, modulo - 1), (modulo // 2, modulo // 3)]:
            assert mont.multiply(a, b) == (a * b * r_inv) % modulo

    @pytest.mark.parametrize("modulo,bits", MODULI)
    def test_convert_and_reduce(self, modulo, bits):
        """Test that convert maps into Montgomery form and reduce maps back."""
        mont = Montgomery(modulo, bits)
        R = 1 << bits
        a = (modulo * 2) // 3
        assert mont.convert(a) == (a * R) % modulo
        assert mont.reduce(mont.convert(a)) == a
        assert mont.convert(1) == mont.r

    @pytest.mark.parametrize("modulo,bits", MODULI)
    def test_pow_matches_builtin(self, modulo, bits):
        """Test pow against Python's built-in modular exponentiation."""
        mont = Montgomery(modulo, bits)
        base = 2 % modulo
        for exp in [1, 2, 3, 17, modulo - 1, (1 << bits) - 1]:
            result = mont.reduce(mont.pow(mont.convert(base), exp))
            assert result == pow(base, exp, modulo)

    def test_pow_zero_exponent(self):
        """Test that exponent 0 yields the Montgomery form of 1."""
        mont = Montgomery(1000000007, 64)
        assert mont.pow(mont.convert(12345), 0) == mont.r
        assert mont.one == mont.r

    def test_fermat_minus_one(self):
        """Test a^((p-1)/2) == -1 for a quadratic non-residue."""
        p = 998244353
        mont = Montgomery(p, 32)
        # 3 is a primitive root of 998244353
        at = mont.pow(mont.convert(3), (p - 1) // 2)
        assert at == mont.minus_one
        assert mont.reduce(at) == p - 1

    def test_results_stay_in_range(self):
        """Test that products never leave [0, N)."""
        modulo = 255
        mont = Montgomery(modulo, 8)
        for a in range(modulo):
            for b in (0, 1, 128, 254):
                assert 0 <= mont.multiply(a, b) < modulo
