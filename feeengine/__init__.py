"""Maker/taker fee engine with a WSGI health endpoint, an upper-casing CLI, wei helpers and test wallets."""

__version__ = "0.1.0"