# primefilter/arith/modular.py
# Exact modular arithmetic on Python ints (no fixed-width ceiling).


def gcd(a: int, b: int) -> int:
    if a < 0 or b < 0:
        raise ValueError(f"gcd expects non-negative ints, got ({a}, {b})")
    while b != 0:
        a, b = b, a % b
    return a


def pow_mod(base: int, exponent: int, modulus: int) -> int:
    """
    base**exponent mod modulus by square-and-multiply.

    Every product is reduced right away, so intermediates stay below modulus**2.
    """
    if modulus == 0:
        raise ZeroDivisionError("pow_mod with modulus 0")
    if exponent < 0:
        raise ValueError(f"exponent must be >= 0, got {exponent}")
    res = 1 % modulus
    base = base % modulus
    while exponent > 0:
        if exponent & 1:
            res = (res * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus
    return res


def multiplicative_order(a: int, modulus: int) -> int:
    """Smallest k >= 1 with a**k == 1 (mod modulus), by repeated multiplication."""
    if modulus < 2:
        raise ValueError(f"modulus must be >= 2, got {modulus}")
    if gcd(a % modulus, modulus) != 1:
        raise ValueError(f"{a} is not a unit modulo {modulus}")
    ord_ = 1
    x = a % modulus
    while x != 1:
        x = (x * a) % modulus
        ord_ += 1
    return ord_
