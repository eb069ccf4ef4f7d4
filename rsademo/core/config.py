"""
RSA configuration module.

Provides the key generation settings used by the engine and the
parsing of user supplied key sizes.
"""
from dataclasses import dataclass

from .exceptions import MalformedSizeInputError


DEFAULT_PUBLIC_EXPONENT = 65537


@dataclass
class RSAConfig:
    """
    Key generation configuration.
    
    The public exponent is fixed; when it is not coprime with the
    totient, or both primes come out equal, the primes are drawn again
    up to ``max_attempts`` times.
    """
    key_size: int = 512
    public_exponent: int = DEFAULT_PUBLIC_EXPONENT
    max_attempts: int = 100
    
    def validate(self) -> 'RSAConfig':
        """Check the settings and return self."""
        if self.public_exponent < 3 or self.public_exponent % 2 == 0:
            raise ValueError(
                f"public_exponent must be an odd integer >= 3, got {self.public_exponent}"
            )
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        return self


def parse_key_size(text: str) -> int:
    """
    Parse a key size typed by the user.
    
    Args:
        text: Raw input, surrounding whitespace is ignored
        
    Returns:
        Key size in bits
        
    Raises:
        MalformedSizeInputError: If text is not a positive even integer
    """
    raw = text.strip()
    if not raw.isdecimal():
        raise MalformedSizeInputError(text)
    
    bits = int(raw)
    if bits <= 0 or bits % 2:
        raise MalformedSizeInputError(text)
    return bits
