"""Textbook RSA engine: key generation and byte-wise encryption."""
from typing import Iterable, List, Optional

from ...config import RSAConfig
from ...exceptions import (
    DecryptedValueOutOfRangeError,
    InvalidUTF8OutputError,
    KeyNotGeneratedError,
    MessageByteTooLargeError,
    NoModularInverseError,
    PrimeGenerationError,
)
from ...logging import get_logger
from ..arithmetic import modpow
from ..primes import PrimeGenerator
from .key_pair import KeyPair

logger = get_logger(__name__)


class RSAEngine:
    """
    Owns one RSA key pair and encrypts text one byte at a time.
    
    Every UTF-8 byte of the message becomes one ciphertext integer
    c = m^e mod n. There is no padding, so equal bytes always encrypt
    to equal integers.
    
    Example:
        >>> engine = RSAEngine()
        >>> key_pair = engine.generate(512)
        >>> ciphertext = engine.encrypt("hello")
        >>> engine.decrypt(ciphertext)
        'hello'
    """
    
    def __init__(
        self,
        config: Optional[RSAConfig] = None,
        prime_generator: Optional[PrimeGenerator] = None,
        key_pair: Optional[KeyPair] = None
    ):
        """
        Initializes the engine.
        
        Args:
            config: Key generation settings
            prime_generator: Prime source (defaults to PrimeGenerator())
            key_pair: Existing key pair; skips generate() when given
        """
        self.config = (config or RSAConfig()).validate()
        self.prime_generator = prime_generator or PrimeGenerator()
        self._key_pair = key_pair
    
    @property
    def has_key(self) -> bool:
        return self._key_pair is not None
    
    @property
    def key_pair(self) -> KeyPair:
        """Current key pair."""
        if self._key_pair is None:
            raise KeyNotGeneratedError("No key pair generated yet, call generate() first")
        return self._key_pair
    
    def generate(self, bits: Optional[int] = None) -> KeyPair:
        """
        Generates a new key pair from two primes of bits // 2 bits each.
        
        The public exponent is fixed by the config. Primes are drawn
        again when they are equal or when the exponent is not coprime
        with the totient, at most config.max_attempts times.
        
        Args:
            bits: Modulus size in bits (defaults to config.key_size)
            
        Returns:
            The new key pair, also held by the engine
            
        Raises:
            PrimeGenerationError: If primes cannot be produced
            NoModularInverseError: If every attempt gave a totient that
                shares a factor with the public exponent
        """
        if bits is None:
            bits = self.config.key_size
        prime_bits = bits // 2
        e = self.config.public_exponent
        
        last_error = None
        for attempt in range(1, self.config.max_attempts + 1):
            p = self.prime_generator.generate(prime_bits)
            q = self.prime_generator.generate(prime_bits)
            
            if p == q:
                logger.debug(f"Attempt {attempt}: drew equal primes, retrying")
                last_error = PrimeGenerationError(
                    f"Could not draw two distinct {prime_bits}-bit primes",
                    bits=prime_bits
                )
                continue
            
            try:
                key_pair = KeyPair.from_primes(p, q, e)
            except NoModularInverseError as err:
                logger.debug(f"Attempt {attempt}: e={e} not coprime with phi, retrying")
                last_error = err
                continue
            
            self._key_pair = key_pair
            logger.info(f"Generated RSA key pair of {bits} bits")
            return key_pair
        
        logger.error(f"Key generation failed after {self.config.max_attempts} attempts")
        raise last_error
    
    def encrypt(self, message: str) -> List[int]:
        """
        Encrypts each UTF-8 byte of message.
        
        Raises:
            MessageByteTooLargeError: If a byte value is >= modulus
        """
        n, e = self.key_pair.public_key
        ciphertext = []
        for position, byte in enumerate(message.encode('utf-8')):
            if byte >= n:
                raise MessageByteTooLargeError(byte, n, position)
            ciphertext.append(modpow(byte, e, n))
        return ciphertext
    
    def decrypt(self, ciphertexts: Iterable[int]) -> str:
        """
        Decrypts a ciphertext sequence back into text.
        
        Raises:
            DecryptedValueOutOfRangeError: If a value does not fit in a byte
            InvalidUTF8OutputError: If the bytes do not decode as UTF-8
        """
        n, d = self.key_pair.private_key
        data = bytearray()
        for position, c in enumerate(ciphertexts):
            m = modpow(c, d, n)
            if m > 0xFF:
                raise DecryptedValueOutOfRangeError(m, position)
            data.append(m)
        
        try:
            return data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidUTF8OutputError(bytes(data), e.reason) from e
