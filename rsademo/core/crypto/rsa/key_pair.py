"""RSA key pair model."""
from dataclasses import dataclass
from typing import Tuple

from ...config import DEFAULT_PUBLIC_EXPONENT
from ..arithmetic import mod_inverse


@dataclass(frozen=True)
class KeyPair:
    """
    Immutable RSA key triple.
    
    Attributes:
        modulus: n = p * q
        public_exponent: e, coprime with (p-1)*(q-1)
        private_exponent: d, inverse of e modulo (p-1)*(q-1)
    """
    modulus: int
    public_exponent: int
    private_exponent: int
    
    @classmethod
    def from_primes(
        cls,
        p: int,
        q: int,
        public_exponent: int = DEFAULT_PUBLIC_EXPONENT
    ) -> 'KeyPair':
        """
        Builds a key pair from two primes.
        
        Raises:
            NoModularInverseError: If public_exponent and the totient
                share a factor
        """
        phi = (p - 1) * (q - 1)
        private_exponent = mod_inverse(public_exponent, phi)
        return cls(
            modulus=p * q,
            public_exponent=public_exponent,
            private_exponent=private_exponent
        )
    
    @property
    def public_key(self) -> Tuple[int, int]:
        """Public key as (n, e)."""
        return self.modulus, self.public_exponent
    
    @property
    def private_key(self) -> Tuple[int, int]:
        """Private key as (n, d)."""
        return self.modulus, self.private_exponent
    
    @property
    def bit_length(self) -> int:
        return self.modulus.bit_length()
