"""Source locations, s-expressions, primitives and include preprocessing for a CLVM-targeting compiler."""

__version__ = "0.1.0"