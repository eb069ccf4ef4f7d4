"""
Custom exceptions for RSA operations.

This module defines exception classes raised by key generation,
encryption and decryption.
"""
from typing import Optional


class RSAException(Exception):
    """Base exception for all RSA-related errors."""
    
    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class PrimeGenerationError(RSAException):
    """Exception raised when a prime of the requested size cannot be produced."""
    
    def __init__(
        self,
        message: str,
        bits: Optional[int] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            bits: Requested prime bit length
            error_code: Numeric error code (if available)
        """
        self.bits = bits
        super().__init__(message, error_code)


class NoModularInverseError(RSAException):
    """Exception raised when a value has no inverse modulo m."""
    
    def __init__(self, value: int, modulus: int) -> None:
        self.value = value
        self.modulus = modulus
        super().__init__(
            f"{value} has no inverse modulo {modulus} (not coprime)"
        )


class MessageByteTooLargeError(RSAException):
    """Exception raised when a plaintext byte is not smaller than the modulus."""
    
    def __init__(self, value: int, modulus: int, position: int) -> None:
        self.value = value
        self.modulus = modulus
        self.position = position
        super().__init__(
            f"Message byte {value} at position {position} is too large "
            f"for modulus {modulus}"
        )


class DecryptedValueOutOfRangeError(RSAException):
    """Exception raised when a decrypted value does not fit in one byte."""
    
    def __init__(self, value: int, position: int) -> None:
        self.value = value
        self.position = position
        super().__init__(
            f"Decrypted value {value} at position {position} does not fit in a byte"
        )


class InvalidUTF8OutputError(RSAException):
    """Exception raised when decrypted bytes are not valid UTF-8."""
    
    def __init__(self, data: bytes, reason: str = "") -> None:
        self.data = data
        message = "Decrypted bytes are not valid UTF-8"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedSizeInputError(RSAException):
    """Exception raised when a key size string is not a positive even integer."""
    
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(
            f"Invalid key size {raw!r}: expected a positive even integer"
        )


class KeyNotGeneratedError(RSAException):
    """Exception raised when encrypting or decrypting before a key exists."""
    pass
