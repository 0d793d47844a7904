"""Caesar, substitution and Vigenère ciphers, with small command-line tools and pattern examples."""

__version__ = "0.1.0"