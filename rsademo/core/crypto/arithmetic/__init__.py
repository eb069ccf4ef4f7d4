"""Number theory helpers."""
from .number_theory import extended_gcd, mod_inverse, modpow

__all__ = [
    'extended_gcd',
    'mod_inverse',
    'modpow',
]
