"""RSA key pair and engine."""
from .key_pair import KeyPair
from .rsa_engine import RSAEngine

__all__ = [
    'KeyPair',
    'RSAEngine',
]
