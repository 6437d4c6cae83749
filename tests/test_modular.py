"""
Tests for the modular arithmetic helpers.

Values above 2**53 are included on purpose: they are exact only with
arbitrary-precision ints.
"""

import pytest

from primefilter.arith.modular import gcd, multiplicative_order, pow_mod


M61 = 2**61 - 1
M89 = 2**89 - 1


class TestGcd:
    def test_gcd_with_zero(self):
        for a in [0, 1, 7, 12, 2**64]:
            assert gcd(a, 0) == a
        assert gcd(0, 0) == 0

    def test_symmetric(self):
        pairs = [(12, 18), (17, 5), (0, 9), (2**70, 2**65 * 3), (M61, M89)]
        for a, b in pairs:
            assert gcd(a, b) == gcd(b, a)

    def test_known_values(self):
        assert gcd(12, 18) == 6
        assert gcd(17, 5) == 1
        assert gcd(2**70, 2**65 * 3) == 2**65

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            gcd(-4, 6)


class TestPowMod:
    def test_zero_exponent(self):
        for m in [2, 3, 10, M61]:
            assert pow_mod(5, 0, m) == 1

    def test_modulus_one(self):
        for b, e in [(0, 0), (5, 0), (5, 3), (M61, 12345)]:
            assert pow_mod(b, e, 1) == 0

    def test_modulus_zero_fails(self):
        with pytest.raises(ZeroDivisionError):
            pow_mod(3, 5, 0)
        with pytest.raises(ZeroDivisionError):
            pow_mod(3, 0, 0)

    def test_negative_exponent_rejected(self):
        with pytest.raises(ValueError):
            pow_mod(3, -1, 7)

    def test_small_values(self):
        assert pow_mod(2, 10, 1000) == 24
        assert pow_mod(3, 4, 5) == 1
        assert pow_mod(10, 3, 7) == 6

    def test_large_operands_are_exact(self):
        """Squares of these operands are far beyond 2**53."""
        base = 2**53 + 1
        assert pow_mod(base, 2, M61) == (base * base) % M61
        assert pow_mod(2**70 + 12345, M61, M89) == pow(2**70 + 12345, M61, M89)

    def test_fermat_on_mersenne_prime(self):
        assert pow_mod(3, M89 - 1, M89) == 1


class TestMultiplicativeOrder:
    def test_known_orders(self):
        assert multiplicative_order(2, 7) == 3
        assert multiplicative_order(3, 7) == 6
        assert multiplicative_order(1, 5) == 1
        assert multiplicative_order(10, 3) == 1

    def test_order_is_minimal(self):
        for a, m in [(2, 11), (5, 13), (7, 101)]:
            k = multiplicative_order(a, m)
            assert pow(a, k, m) == 1
            assert all(pow(a, j, m) != 1 for j in range(1, k))

    def test_non_unit_rejected(self):
        with pytest.raises(ValueError):
            multiplicative_order(6, 9)
        with pytest.raises(ValueError):
            multiplicative_order(3, 1)
