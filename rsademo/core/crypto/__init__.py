"""Crypto module: number theory, prime generation and the RSA engine."""
from .arithmetic import extended_gcd, mod_inverse, modpow
from .primes import PrimeGenerator
from .rsa import KeyPair, RSAEngine

__all__ = [
    'extended_gcd',
    'mod_inverse',
    'modpow',
    'PrimeGenerator',
    'KeyPair',
    'RSAEngine',
]
