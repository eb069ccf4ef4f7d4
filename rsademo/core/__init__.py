"""Core modules for rsademo."""
from .exceptions import (
    RSAException,
    PrimeGenerationError,
    NoModularInverseError,
    MessageByteTooLargeError,
    DecryptedValueOutOfRangeError,
    InvalidUTF8OutputError,
    MalformedSizeInputError,
    KeyNotGeneratedError,
)
from .config import RSAConfig, parse_key_size
from .crypto import KeyPair, RSAEngine, PrimeGenerator
