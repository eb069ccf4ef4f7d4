"""
rsademo - Textbook RSA key generation and byte-wise encryption.

Usage:
    >>> from rsademo import RSAEngine
    >>> 
    >>> engine = RSAEngine()
    >>> key_pair = engine.generate(512)
    >>> engine.decrypt(engine.encrypt("hello"))
    'hello'

Not meant for protecting real data: no padding, deterministic per-byte
encryption.
"""
import logging

from .core.exceptions import (
    RSAException,
    PrimeGenerationError,
    NoModularInverseError,
    MessageByteTooLargeError,
    DecryptedValueOutOfRangeError,
    InvalidUTF8OutputError,
    MalformedSizeInputError,
    KeyNotGeneratedError,
)
from .core.config import RSAConfig, parse_key_size
from .core.crypto import (
    KeyPair,
    RSAEngine,
    PrimeGenerator,
    extended_gcd,
    mod_inverse,
    modpow,
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for rsademo modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'rsademo',
        'rsademo.cli',
        'rsademo.core.crypto.primes.prime_generator',
        'rsademo.core.crypto.rsa.rsa_engine',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'RSAEngine',
    'KeyPair',
    'RSAConfig',
    'PrimeGenerator',
    'parse_key_size',
    'extended_gcd',
    'mod_inverse',
    'modpow',
    'RSAException',
    'PrimeGenerationError',
    'NoModularInverseError',
    'MessageByteTooLargeError',
    'DecryptedValueOutOfRangeError',
    'InvalidUTF8OutputError',
    'MalformedSizeInputError',
    'KeyNotGeneratedError',
    'setup_logging',
]
