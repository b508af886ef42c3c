"""
Random password generation for the Password Analyzer.

Passwords are drawn uniformly, one position at a time, from the charset a
GenerationPolicy selects. No class is guaranteed to appear, so a short
password with every class enabled may still miss one.
"""

import random
import string
from typing import NamedTuple, Optional

from password_analyzer.utils.logger import get_logger

logger = get_logger(__name__)

SYMBOLS = "!@#$%^&*()_-+=<>?/"
DEFAULT_LENGTH = 16


class GenerationPolicy(NamedTuple):
    """Which character classes to draw from, and how many characters"""

    length: int = DEFAULT_LENGTH
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True

    def charset(self) -> str:
        """Build the charset for this policy

        Classes are concatenated lowercase, uppercase, digits, symbols.
        With nothing enabled the lowercase alphabet is used on its own.
        """
        charset = ""
        if self.include_lowercase:
            charset += string.ascii_lowercase
        if self.include_uppercase:
            charset += string.ascii_uppercase
        if self.include_numbers:
            charset += string.digits
        if self.include_symbols:
            charset += SYMBOLS
        return charset or string.ascii_lowercase


class PasswordGenerator:
    """Generator for random passwords following a GenerationPolicy"""

    def __init__(self, policy: Optional[GenerationPolicy] = None, rng=None):
        """Initialize with a policy and an optional random source

        Args:
            policy: Generation policy (defaults to 16 chars, all classes)
            rng: Object with a ``randrange`` method; defaults to
                ``random.SystemRandom()``
        """
        self.policy = policy or GenerationPolicy()
        self.rng = rng or random.SystemRandom()
        self.charset = self.policy.charset()
        self.charset_size = len(self.charset)

    def generate(self) -> str:
        """Generate one password"""
        chars = [
            self.charset[self.rng.randrange(self.charset_size)]
            for _ in range(max(self.policy.length, 0))
        ]
        logger.debug(
            f"Generated password of length {len(chars)} from a {self.charset_size}-character set"
        )
        return "".join(chars)


def generate_password(length: int = DEFAULT_LENGTH,
                      include_lowercase: bool = True,
                      include_uppercase: bool = True,
                      include_numbers: bool = True,
                      include_symbols: bool = True,
                      rng=None) -> str:
    """Generate a random password

    Args:
        length: Number of characters; zero or less gives an empty string
        include_lowercase: Draw from a-z
        include_uppercase: Draw from A-Z
        include_numbers: Draw from 0-9
        include_symbols: Draw from ``SYMBOLS``
        rng: Optional random source with a ``randrange`` method

    Returns:
        The generated password
    """
    policy = GenerationPolicy(
        length=length,
        include_lowercase=include_lowercase,
        include_uppercase=include_uppercase,
        include_numbers=include_numbers,
        include_symbols=include_symbols,
    )
    return PasswordGenerator(policy, rng=rng).generate()
