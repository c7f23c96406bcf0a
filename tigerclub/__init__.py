"""Tiger Soccer Club console registration form."""

__version__ = "1.0.0"
