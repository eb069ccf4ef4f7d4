"""Tests for the exception hierarchy."""
import pytest

from rsademo.core.exceptions import (
    RSAException,
    PrimeGenerationError,
    NoModularInverseError,
    MessageByteTooLargeError,
    DecryptedValueOutOfRangeError,
    InvalidUTF8OutputError,
    MalformedSizeInputError,
    KeyNotGeneratedError,
)


class TestExceptions:
    """Test suite for RSA exceptions."""
    
    @pytest.mark.parametrize("exc", [
        PrimeGenerationError("failed", bits=8),
        NoModularInverseError(6, 9),
        MessageByteTooLargeError(65, 35, 0),
        DecryptedValueOutOfRangeError(300, 2),
        InvalidUTF8OutputError(b"\xff"),
        MalformedSizeInputError("abc"),
        KeyNotGeneratedError("no key"),
    ])
    def test_all_derive_from_base(self, exc):
        """Test every error can be caught as RSAException."""
        assert isinstance(exc, RSAException)
        assert str(exc) == exc.message
    
    def test_error_code(self):
        """Test optional error code."""
        exc = RSAException("boom", error_code=3)
        
        assert exc.error_code == 3
        assert str(exc) == "boom"
    
    def test_prime_generation_bits(self):
        """Test requested size is kept."""
        exc = PrimeGenerationError("failed", bits=1)
        
        assert exc.bits == 1
        assert exc.error_code is None
    
    def test_messages_mention_values(self):
        """Test messages carry the offending values."""
        assert "6" in str(NoModularInverseError(6, 9))
        assert "position 4" in str(MessageByteTooLargeError(200, 35, 4))
        assert "300" in str(DecryptedValueOutOfRangeError(300, 0))
        assert "'abc'" in str(MalformedSizeInputError("abc"))
    
    def test_utf8_reason(self):
        """Test the decoder reason is appended."""
        exc = InvalidUTF8OutputError(b"\xff", "invalid start byte")
        
        assert exc.data == b"\xff"
        assert str(exc).endswith("invalid start byte")
