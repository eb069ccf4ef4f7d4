"""Pytest fixtures for rsademo tests."""
import pytest

from rsademo.core.crypto import KeyPair, RSAEngine


@pytest.fixture
def textbook_key_pair():
    """Returns the classic p=61, q=53, e=17 key pair (n=3233, d=2753)."""
    return KeyPair.from_primes(61, 53, 17)


@pytest.fixture
def textbook_engine(textbook_key_pair):
    """Returns an engine holding the textbook key pair."""
    return RSAEngine(key_pair=textbook_key_pair)


@pytest.fixture
def engine_64():
    """Returns an engine with a fresh 64-bit key pair."""
    engine = RSAEngine()
    engine.generate(64)
    return engine
