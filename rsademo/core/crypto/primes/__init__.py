"""Prime generation."""
from .prime_generator import PrimeGenerator

__all__ = ['PrimeGenerator']
