"""Probable prime generation backed by PyCryptodome."""
from typing import Callable, Optional

from Crypto.Util.number import getPrime, isPrime

from ...exceptions import PrimeGenerationError
from ...logging import get_logger

logger = get_logger(__name__)

RandFunc = Callable[[int], bytes]


class PrimeGenerator:
    """Draws random probable primes of an exact bit length."""
    
    def __init__(self, randfunc: Optional[RandFunc] = None):
        """
        Initializes the generator.
        
        Args:
            randfunc: Callable returning n random bytes. Defaults to the
                PyCryptodome system source; pass a seeded one for
                reproducible keys.
        """
        self.randfunc = randfunc
    
    def generate(self, bits: int) -> int:
        """Returns a probable prime with exactly `bits` bits."""
        try:
            prime = getPrime(bits, randfunc=self.randfunc)
        except (ValueError, TypeError) as e:
            raise PrimeGenerationError(
                f"Cannot generate a {bits}-bit prime: {e}", bits=bits
            ) from e
        logger.debug(f"Generated {bits}-bit prime")
        return prime
    
    def is_probable_prime(self, n: int) -> bool:
        """Miller-Rabin/Lucas test from PyCryptodome."""
        if n < 2:
            return False
        return bool(isPrime(n, randfunc=self.randfunc))
