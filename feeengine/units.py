"""Ether unit conversions and test address helpers."""

from __future__ import annotations

WEI_PER_ETH = 10**18
_DECIMALS = 18
_U64_LIMIT = 2**64
_U256_LIMIT = 2**256
ADDRESS_LENGTH = 20


def eth_to_wei(eth: int) -> int:
    """Convert a whole number of ether to wei."""
    if isinstance(eth, bool) or not isinstance(eth, int):
        raise TypeError("eth must be an integer")
    if not 0 <= eth < _U64_LIMIT:
        raise ValueError("eth must fit in an unsigned 64-bit integer")
    return eth * WEI_PER_ETH


def wei_to_eth_string(wei: int) -> str:
    """Format an amount of wei as ether with all 18 decimals."""
    if isinstance(wei, bool) or not isinstance(wei, int):
        raise TypeError("wei must be an integer")
    if not 0 <= wei < _U256_LIMIT:
        raise ValueError("wei must fit in an unsigned 256-bit integer")
    digits = str(wei)
    if len(digits) <= _DECIMALS:
        return "0." + digits.rjust(_DECIMALS, "0")
    return f"{digits[:-_DECIMALS]}.{digits[-_DECIMALS:]}"


def generate_test_address(index: int) -> bytes:
    """Return a 20-byte address that is zero except for its last byte."""
    if not 0 <= index <= 0xFF:
        raise ValueError("index must fit in one byte")
    return bytes(ADDRESS_LENGTH - 1) + bytes([index])