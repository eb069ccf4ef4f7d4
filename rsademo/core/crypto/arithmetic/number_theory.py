"""Modular arithmetic used by RSA key generation and the per-byte transform."""
from typing import Tuple

from ...exceptions import NoModularInverseError


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean algorithm.
    
    Returns:
        Tuple (g, x, y) with a*x + b*y == g == gcd(a, b)
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    
    if old_r < 0:
        return -old_r, -old_x, -old_y
    return old_r, old_x, old_y


def mod_inverse(a: int, m: int) -> int:
    """
    Modular inverse of a modulo m.
    
    Args:
        a: Value to invert
        m: Modulus (positive)
        
    Returns:
        The unique d in [0, m) with a*d % m == 1
        
    Raises:
        NoModularInverseError: If gcd(a, m) > 1
    """
    if m <= 0:
        raise ValueError(f"modulus must be positive, got {m}")
    
    g, x, _ = extended_gcd(a % m, m)
    if g != 1:
        raise NoModularInverseError(a, m)
    
    # Bezout coefficient may be negative
    return x % m


def modpow(base: int, exponent: int, modulus: int) -> int:
    """Compute base**exponent % modulus by left-to-right square-and-multiply."""
    if modulus <= 0:
        raise ValueError(f"modulus must be positive, got {modulus}")
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    
    result = 1 % modulus
    base %= modulus
    for bit in bin(exponent)[2:]:
        result = (result * result) % modulus
        if bit == '1':
            result = (result * base) % modulus
    return result
